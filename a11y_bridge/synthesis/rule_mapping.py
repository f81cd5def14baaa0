"""
Rule identifier mapping.

Some deployments report under UDOIT rule names instead of the audit engine's
native identifiers. The mapping is a pluggable pre-filter applied before the
issue filter: a mapper returns the reporting identifier, or None to drop the
finding.

Tables are loaded from YAML:

    rule_mappings:
      img_alt_valid: ImageHasAlt
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping, Optional, Protocol

import structlog
import yaml

from ..config import Settings

logger = structlog.get_logger(__name__)

BUNDLED_RULE_MAPPINGS_PATH = Path(__file__).parent.parent / "data" / "rule_mappings.yaml"


class RuleMapper(Protocol):
    def map_rule(self, rule_id: str) -> Optional[str]:
        ...


class PassthroughRuleMapper:
    """Mapping inactive: every identifier is reported as-is."""

    def map_rule(self, rule_id: str) -> Optional[str]:
        return rule_id


class StaticRuleMapper:
    """Lookup-table mapper. Identifiers absent from the table are dropped."""

    def __init__(self, mappings: Mapping[str, str]):
        self._mappings: Dict[str, str] = dict(mappings)

    @property
    def mappings(self) -> Dict[str, str]:
        return dict(self._mappings)

    def map_rule(self, rule_id: str) -> Optional[str]:
        mapped = self._mappings.get(rule_id)
        logger.debug("Rule mapped", engine_rule=rule_id, mapped_rule=mapped or "UnknownRule")
        return mapped


def _default_rule_mappings() -> Dict[str, str]:
    """Fallback table if the YAML file is not found"""
    return {
        "img_alt_misuse": "ImageAltIsDifferent",
        "img_alt_valid": "ImageHasAlt",
        "a_text_purpose": "AnchorMustContainText",
        "caption_track_exists": "VideoProvidesCaptions",
        "table_headers_exist": "TableDataShouldHaveTableHeader",
        "blink_elem_deprecated": "BlinkIsNotUsed",
        "marquee_elem_avoid": "MarqueeIsNotUsed",
        "object_text_exists": "ObjectMustContainText",
        "heading_content_exists": "HeadersHaveText",
        "text_block_heading": "ParagraphNotUsedAsHeader",
        "text_contrast_sufficient": "CssTextHasContrast",
    }


def load_rule_mappings(path: Optional[Path] = None) -> Dict[str, str]:
    """
    Load a rule mapping table from YAML.

    Args:
        path: YAML file with a ``rule_mappings`` section. Defaults to the
              bundled table.

    Returns:
        Engine rule id -> reporting rule id
    """
    config_path = Path(path) if path else BUNDLED_RULE_MAPPINGS_PATH

    if not config_path.exists():
        logger.warning("Rule mapping config not found, using defaults", path=str(config_path))
        return _default_rule_mappings()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.error(
            "Failed to load rule mappings from YAML",
            error=str(exc),
            path=str(config_path),
            exc_info=True,
        )
        return _default_rule_mappings()

    mappings = config.get("rule_mappings") or {}
    logger.info("Rule mappings loaded", path=str(config_path), count=len(mappings))
    return {str(engine_rule): str(mapped) for engine_rule, mapped in mappings.items()}


def get_rule_mapper(settings: Settings) -> RuleMapper:
    """Pick the mapper for the configured deployment."""
    if not settings.rule_mapping_enabled:
        return PassthroughRuleMapper()
    path = Path(settings.rule_mapping_path) if settings.rule_mapping_path else None
    return StaticRuleMapper(load_rule_mappings(path))
