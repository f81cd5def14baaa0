"""
Scan service: bridge between content items and the audit engine.

Normalizes the content, sends the scaffolded document to the engine and
turns the engine's findings into a report.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

import structlog

from ..clients.audit_engine import AuditEngineClient, get_audit_engine_client
from ..config import Settings, get_settings
from ..schemas.report import Report
from ..synthesis.aggregator import generate_report
from ..synthesis.normalizer import Document, normalize, serialize_document
from ..synthesis.rule_mapping import RuleMapper, get_rule_mapper

logger = structlog.get_logger(__name__)


class ContentItem(Protocol):
    body: Optional[str]


def clean_html(html: Optional[str]) -> Optional[str]:
    """Return stripped HTML, or None when there is nothing to scan."""
    if html is None:
        return None
    cleaned = html.strip()
    return cleaned or None


class ScanService:
    """Runs one scan per call; no state is shared between scans."""

    def __init__(
        self,
        client: Optional[AuditEngineClient] = None,
        settings: Optional[Settings] = None,
        rule_mapper: Optional[RuleMapper] = None,
    ):
        self.settings = settings or get_settings()
        self.client = client or get_audit_engine_client()
        self.rule_mapper = rule_mapper or get_rule_mapper(self.settings)

    def get_document(self, content: str) -> Document:
        return normalize(
            content,
            background_color=self.settings.background_color,
            text_color=self.settings.text_color,
        )

    def generate_report(self, payload: Any, document: Document) -> Report:
        return generate_report(
            payload,
            document,
            ignore_class_name=self.settings.ignore_class_name,
            skip_rule_ids=self.settings.skip_rule_ids_set,
            rule_mapper=self.rule_mapper,
        )

    async def check_many(self, content: str) -> Report:
        """
        Scan HTML content with the audit engine.

        Raises:
            ParseError: If the content cannot be parsed at all
            AuditEngineUnavailableError: If the engine cannot be reached
            MalformedEngineResponseError: If the engine answer is unusable
        """
        document = self.get_document(content)
        payload = await self.client.check(serialize_document(document))
        return self.generate_report(payload, document)

    async def scan_html(self, html: Optional[str]) -> Optional[Report]:
        content = clean_html(html)
        if content is None:
            logger.debug("Nothing to scan, empty HTML")
            return None
        return await self.check_many(content)

    async def scan_content_item(self, content_item: ContentItem) -> Optional[Report]:
        return await self.scan_html(getattr(content_item, "body", None))
