"""
Path resolver: turns an audit engine XPath into a node of the scanned document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import structlog
from lxml import etree

from .normalizer import Document

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LocatedNode:
    """Node a path query resolved to, with its parent (None for the root)."""

    node: etree._Element
    parent: Optional[etree._Element]

    @property
    def is_root(self) -> bool:
        return self.parent is None


def resolve(document: Document, path_query: str) -> Optional[LocatedNode]:
    """
    Resolve ``path_query`` against ``document``.

    When the query matches several nodes the last one in evaluation order is
    kept. Non-node results and invalid expressions count as no match.
    """
    try:
        results = document.xpath(path_query)
    except etree.XPathError as e:
        logger.warning("Invalid path query", path_query=path_query, error=str(e))
        return None

    if not isinstance(results, list):
        return None

    selected = None
    for result in results:
        if isinstance(result, etree._Element):
            selected = result

    if selected is None:
        return None

    return LocatedNode(node=selected, parent=selected.getparent())
