"""
Document normalizer.

Wraps an arbitrary HTML fragment in a fixed scaffold so rules that look for a
title, landmarks or headings always see the same document shape. The caller's
markup is inserted verbatim under ``/html/body/main``.
"""

from __future__ import annotations

import re
from typing import Optional

import structlog
from lxml import etree
from lxml import html as lxml_html

from ..core.exceptions import ParseError

logger = structlog.get_logger(__name__)

Document = etree._ElementTree

ENCODING_DECLARATION = '<?xml encoding="utf-8" ?>'
_ENCODING_DECLARATION_RE = re.compile(r"<\?xml[^>]*\bencoding\s*=", re.IGNORECASE)

PLACEHOLDER_TITLE = "Placeholder Page Title"
PLACEHOLDER_HEADING = "Placeholder Heading"

DEFAULT_BACKGROUND_COLOR = "#ffffff"
DEFAULT_TEXT_COLOR = "#000000"

SCAFFOLD_TEMPLATE = (
    "<!DOCTYPE html>"
    '<html lang="en">'
    "<head>"
    '<meta charset="utf-8">'
    '<meta name="viewport" content="width=device-width, initial-scale=1">'
    "<title>{title}</title>"
    "<style>body {{ background-color: {background_color}; color: {text_color}; }}</style>"
    "</head>"
    "<body>"
    "<main>"
    "<h1>{heading}</h1>"
    "{fragment}"
    "</main>"
    "</body>"
    "</html>"
)


def has_encoding_declaration(fragment: str) -> bool:
    return bool(_ENCODING_DECLARATION_RE.search(fragment))


def build_scaffold(
    fragment: str,
    background_color: Optional[str] = None,
    text_color: Optional[str] = None,
) -> str:
    """Return the full markup for ``fragment``, scaffold included."""
    markup = SCAFFOLD_TEMPLATE.format(
        title=PLACEHOLDER_TITLE,
        heading=PLACEHOLDER_HEADING,
        background_color=background_color or DEFAULT_BACKGROUND_COLOR,
        text_color=text_color or DEFAULT_TEXT_COLOR,
        fragment=fragment,
    )
    if has_encoding_declaration(fragment):
        return markup
    return ENCODING_DECLARATION + markup


def normalize(
    fragment: str,
    background_color: Optional[str] = None,
    text_color: Optional[str] = None,
) -> Document:
    """
    Parse an HTML fragment into a scaffolded document tree.

    Invalid or HTML5-only markup is recovered silently; the parser's error
    log is discarded.

    Args:
        fragment: Caller HTML, typically a body excerpt
        background_color: Default page background for the embedded style
        text_color: Default text color for the embedded style

    Returns:
        lxml ElementTree rooted at ``<html>``

    Raises:
        ParseError: If no tree could be produced at all
    """
    markup = build_scaffold(fragment, background_color, text_color)
    parser = lxml_html.HTMLParser(encoding="utf-8", recover=True)

    # Lone surrogates are not encodable and become "?".
    data = markup.encode("utf-8", errors="replace")

    try:
        root = lxml_html.document_fromstring(data, parser=parser)
    except (etree.ParserError, etree.XMLSyntaxError) as e:
        logger.error("Failed to parse HTML fragment", error=str(e), fragment_length=len(fragment))
        raise ParseError(f"Unable to parse HTML content: {e}") from e

    if parser.error_log:
        logger.debug("Recovered from markup errors", error_count=len(parser.error_log))

    return root.getroottree()


def serialize_document(document: Document) -> str:
    """
    Render the whole document, doctype included.

    Only the doctype and the root element are written. The prepended encoding
    declaration survives parsing as a comment before <html> and is left out.
    """
    return lxml_html.tostring(
        document.getroot(),
        encoding="unicode",
        method="html",
        doctype=document.docinfo.doctype or None,
    )


def serialize_node(node: etree._Element) -> str:
    """Render a single node without its trailing text."""
    return lxml_html.tostring(node, encoding="unicode", method="html", with_tail=False)
