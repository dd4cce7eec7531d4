"""Cheap pre-filter deciding whether a page is worth full article extraction.

The heuristic itself is trafilatura's port of Mozilla Readability's
``isProbablyReaderable``.  What this module adds is the bar: the minimum
content length is not a constant but a third of the page's own body text, so
short pages face a proportionally stricter bar and long pages a more lenient
one.
"""

from __future__ import annotations

import re

from loguru import logger
from lxml.html import HtmlElement
from trafilatura.readability_lxml import is_probably_readerable as _readerable
from trafilatura.utils import load_html

from readerview.config import settings
from readerview.scraper.models import ParsedDocument

_DISPLAY_NONE = re.compile(r"display\s*:\s*none", re.IGNORECASE)
_VISIBILITY_HIDDEN = re.compile(r"visibility\s*:\s*hidden", re.IGNORECASE)


def _is_visible(node: HtmlElement) -> bool:
    style = node.get("style") or ""
    if _DISPLAY_NONE.search(style) or _VISIBILITY_HIDDEN.search(style):
        return False
    if "hidden" in node.attrib:
        return False
    if node.get("aria-hidden") == "true" and "fallback-image" not in (node.get("class") or ""):
        return False
    return True


def is_probably_readerable(
    document: ParsedDocument,
    min_content_length: float,
    min_score: float,
) -> bool:
    """Return ``True`` once enough visible, likely-content nodes accumulate score."""
    if not document.body_text_length:
        return False
    tree = load_html(document.html)
    if tree is None:
        logger.debug(f"{document.url}: lxml could not load the page")
        return False
    return _readerable(
        tree,
        {
            "min_content_length": min_content_length,
            "min_score": min_score,
            "visibility_checker": _is_visible,
        },
    )


def readerable_threshold(document: ParsedDocument) -> float:
    """Minimum node text length for *document*: a third of its body text."""
    return document.body_text_length / 3


def is_article_like(document: ParsedDocument) -> bool:
    """Decide whether *document* should go through full article extraction."""
    threshold = readerable_threshold(document)
    verdict = is_probably_readerable(
        document,
        min_content_length=threshold,
        min_score=settings.min_readerable_score,
    )
    logger.debug(
        f"{document.url}: body={document.body_text_length} "
        f"threshold={threshold:.1f} article_like={verdict}"
    )
    return verdict
