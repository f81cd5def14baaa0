"""
Issue filter: author opt-out markers and operator skip lists.
"""

from __future__ import annotations

from typing import AbstractSet, Optional

from .resolver import LocatedNode

DEFAULT_IGNORE_CLASS_NAME = "phpally-ignore"


def has_ignore_marker(located: LocatedNode, ignore_class_name: str) -> bool:
    if not ignore_class_name:
        return False
    class_attr = located.node.get("class") or ""
    return ignore_class_name in class_attr.split()


def should_accept(
    located: Optional[LocatedNode],
    rule_id: str,
    ignore_class_name: str = DEFAULT_IGNORE_CLASS_NAME,
    skip_rule_ids: AbstractSet[str] = frozenset(),
) -> bool:
    """
    Decide whether a located finding is reported.

    Rejects, in order: unresolved locations, nodes carrying the ignore class
    token, rules in the skip set.
    """
    if located is None:
        return False

    if has_ignore_marker(located, ignore_class_name):
        return False

    if rule_id in skip_rule_ids:
        return False

    return True
