"""
Schemas Package - Data Transfer Objects for the accessibility bridge.

Contains Pydantic models for:
- Audit engine findings (input)
- Issues and reports (output)
"""

from .findings import EngineResponse, Finding, FindingPath
from .report import Issue, IssueMetadata, Report

__all__ = [
    # Engine input
    "EngineResponse",
    "Finding",
    "FindingPath",
    # Report output
    "Issue",
    "IssueMetadata",
    "Report",
]
