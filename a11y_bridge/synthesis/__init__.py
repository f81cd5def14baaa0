"""
Report Synthesis - turns audit engine findings into a UDOIT-style report.

This package contains:
- normalizer: scaffolds an HTML fragment into a document tree
- resolver: resolves XPath pointers to nodes (last match wins)
- issue_filter: ignore-class and skip-list suppression
- rule_mapping: optional engine -> UDOIT rule name mapping
- metadata: rule-specific dynamic data
- aggregator: counted, ordered report
"""

from .aggregator import aggregate, generate_report, parse_engine_response
from .issue_filter import should_accept
from .metadata import synthesize
from .normalizer import Document, normalize, serialize_document, serialize_node
from .resolver import LocatedNode, resolve
from .rule_mapping import (
    PassthroughRuleMapper,
    RuleMapper,
    StaticRuleMapper,
    get_rule_mapper,
    load_rule_mappings,
)

__all__ = [
    "aggregate",
    "generate_report",
    "parse_engine_response",
    "should_accept",
    "synthesize",
    "Document",
    "normalize",
    "serialize_document",
    "serialize_node",
    "LocatedNode",
    "resolve",
    "PassthroughRuleMapper",
    "RuleMapper",
    "StaticRuleMapper",
    "get_rule_mapper",
    "load_rule_mappings",
]
