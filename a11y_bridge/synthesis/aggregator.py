"""
Report aggregator.

Single pass over the audit engine findings, in engine order:

    map rule -> resolve path -> filter -> (root check) -> count -> metadata -> issue

Findings that cannot be mapped, located, or that are suppressed are skipped
without touching the report. A finding located at the document root has no
preview context and is skipped too.
"""

from __future__ import annotations

from typing import AbstractSet, Any, Dict, Iterable, List, Optional

import structlog
from pydantic import ValidationError

from ..core.exceptions import MalformedEngineResponseError
from ..schemas.findings import EngineResponse, Finding
from ..schemas.report import Issue, Report
from .issue_filter import DEFAULT_IGNORE_CLASS_NAME, should_accept
from .metadata import synthesize
from .normalizer import Document, serialize_node
from .resolver import resolve
from .rule_mapping import RuleMapper

logger = structlog.get_logger(__name__)


def parse_engine_response(payload: Any) -> EngineResponse:
    """
    Validate a decoded audit engine payload.

    Raises:
        MalformedEngineResponseError: If ``results`` is missing or any result
            lacks its rule id or path pointer
    """
    try:
        return EngineResponse.model_validate(payload)
    except ValidationError as e:
        logger.error("Malformed audit engine response", error_count=e.error_count())
        raise MalformedEngineResponseError(
            f"Audit engine response does not match the expected structure: {e.error_count()} error(s)"
        ) from e


def aggregate(
    findings: Iterable[Finding],
    document: Document,
    ignore_class_name: str = DEFAULT_IGNORE_CLASS_NAME,
    skip_rule_ids: AbstractSet[str] = frozenset(),
    rule_mapper: Optional[RuleMapper] = None,
) -> Report:
    """
    Build a report from findings against a normalized document.

    Args:
        findings: Findings in audit engine order
        document: Document the engine scanned
        ignore_class_name: Class token marking author opt-outs
        skip_rule_ids: Rule identifiers never reported
        rule_mapper: Optional rule identifier mapping applied first

    Returns:
        Report with issues in input order and per-rule counts
    """
    issues: List[Issue] = []
    issue_counts: Dict[str, int] = {}

    for finding in findings:
        rule_id: Optional[str] = finding.rule_id
        if rule_mapper is not None:
            rule_id = rule_mapper.map_rule(finding.rule_id)
            if rule_id is None:
                logger.debug("Skipping unmapped rule", engine_rule=finding.rule_id)
                continue

        located = resolve(document, finding.path_query)
        if not should_accept(located, rule_id, ignore_class_name, skip_rule_ids):
            logger.debug(
                "Finding suppressed",
                rule_id=rule_id,
                path_query=finding.path_query,
                located=located is not None,
            )
            continue

        if located.is_root:
            logger.debug("Skipping finding located at document root", rule_id=rule_id)
            continue

        issue_counts[rule_id] = issue_counts.get(rule_id, 0) + 1

        metadata = synthesize(finding.reason_id, finding.message, finding.message_args)

        issues.append(
            Issue(
                rule_id=rule_id,
                node_snippet=serialize_node(located.node),
                preview_snippet=serialize_node(located.parent),
                metadata=metadata,
            )
        )

    logger.info("Report generated", total_issues=len(issues), issue_counts=issue_counts)

    return Report(issues=issues, issue_counts=issue_counts, errors=[])


def generate_report(
    payload: Any,
    document: Document,
    ignore_class_name: str = DEFAULT_IGNORE_CLASS_NAME,
    skip_rule_ids: AbstractSet[str] = frozenset(),
    rule_mapper: Optional[RuleMapper] = None,
) -> Report:
    """Validate a raw audit engine payload and aggregate its findings."""
    response = parse_engine_response(payload)
    return aggregate(
        response.results,
        document,
        ignore_class_name=ignore_class_name,
        skip_rule_ids=skip_rule_ids,
        rule_mapper=rule_mapper,
    )
