"""Article extraction: readability content plus page metadata."""

from __future__ import annotations

from typing import Any, Optional

import trafilatura
from bs4 import BeautifulSoup
from loguru import logger
from readability import Document
from readability.readability import Unparseable

from readerview.scraper.models import ArticleResult, ParsedDocument


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _first_paragraph(fragment: BeautifulSoup) -> Optional[str]:
    for p in fragment.find_all("p"):
        text = p.get_text().strip()
        if text:
            return text
    return None


def _readability_title(reader: Document) -> Optional[str]:
    title = _clean_optional(reader.short_title())
    # readability-lxml reports a missing <title> as a placeholder string
    if title == "[no-title]":
        return None
    return title


def _document_lang(document: ParsedDocument) -> Optional[str]:
    root = document.soup.html
    if root is None:
        return None
    return _clean_optional(root.get("lang"))


def _page_metadata(document: ParsedDocument) -> Any:
    """Title/author/description/sitename/date as found by trafilatura, or ``None``."""
    return trafilatura.extract_metadata(document.html, default_url=document.url)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_article(document: ParsedDocument) -> ArticleResult | None:
    """Run the readability engine over *document*.

    Relative links and images in the returned fragment are made absolute
    against ``document.url``.  Returns ``None`` when readability cannot find
    any content, which can happen even for pages the classifier accepted.
    """
    reader = Document(document.html, url=document.url)
    try:
        content = reader.summary(html_partial=True)
    except Unparseable as exc:
        logger.info(f"Readability could not parse {document.url}: {exc}")
        return None

    fragment = BeautifulSoup(content, "lxml")
    text_content = fragment.get_text()
    if not text_content.strip():
        logger.info(f"Readability found no content in {document.url}")
        return None

    meta = _page_metadata(document)
    title = _clean_optional(getattr(meta, "title", None)) or _readability_title(reader)
    excerpt = _clean_optional(getattr(meta, "description", None)) or _first_paragraph(
        fragment
    )

    return ArticleResult(
        content=content,
        text_content=text_content,
        title=title,
        byline=_clean_optional(getattr(meta, "author", None)),
        excerpt=excerpt,
        site_name=_clean_optional(getattr(meta, "sitename", None)),
        lang=_document_lang(document),
        length=len(text_content),
        published_time=_clean_optional(getattr(meta, "date", None)),
    )
