"""
Report schemas for the review UI.

Field aliases keep the UDOIT wire names: ``issues``, ``issueCounts`` and
``errors`` on the report, camelCase on each issue.
"""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IssueMetadata(BaseModel):
    """Opaque rule-specific payload kept until display."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    reason_id: str = Field(..., alias="reasonId", description="Rule-specific reason code")
    message: str = Field(..., description="Human-readable message template")
    message_args: List[Any] = Field(
        default_factory=list,
        alias="messageArgs",
        description="Ordered substitution arguments for the template",
    )

    def to_json(self) -> str:
        """Serialize as the compact JSON string stored alongside an issue."""
        return json.dumps(self.model_dump(by_alias=True), ensure_ascii=False)


class Issue(BaseModel):
    """Accepted finding, located in the scanned document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rule_id: str = Field(..., alias="ruleId", description="Rule identifier")
    node_snippet: str = Field(..., alias="nodeSnippet", description="Serialized offending node")
    preview_snippet: str = Field(
        ..., alias="previewSnippet", description="Serialized parent node shown as context"
    )
    metadata: Optional[IssueMetadata] = Field(None, description="Rule-specific dynamic data")


class Report(BaseModel):
    """Counted, ordered issue report for one scan."""

    model_config = ConfigDict(populate_by_name=True)

    issues: List[Issue] = Field(default_factory=list, description="Issues in engine order")
    issue_counts: Dict[str, int] = Field(
        default_factory=dict,
        alias="issueCounts",
        description="Occurrences per rule, keyed in first-seen order",
    )
    errors: List[str] = Field(
        default_factory=list,
        description="Engine-level failures; reserved, currently always empty",
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)
