"""Output post-processing: whitespace cleanup or HTML-to-markdown conversion."""

from __future__ import annotations

import re
from dataclasses import replace

from bs4 import BeautifulSoup
from markdownify import MarkdownConverter

from readerview.scraper.models import (
    ArticleResult,
    ExtractionResult,
    FallbackResult,
    OutputMode,
)

_WHITESPACE_RUN = re.compile(r"[\s\u200b-\u200d\ufeff]+")
_LEADING_WHITESPACE = re.compile(r"^\s+", re.MULTILINE)
_NEWLINE_RUN = re.compile(r"\n+")

_CONVERTER = MarkdownConverter(heading_style="ATX", bullets="-")


def clean_string(value: str) -> str:
    """Collapse whitespace and zero-width characters, trim line starts, squeeze newlines.

    Idempotent: ``clean_string(clean_string(s)) == clean_string(s)``.
    """
    value = _WHITESPACE_RUN.sub(" ", value)
    value = _LEADING_WHITESPACE.sub("", value)
    return _NEWLINE_RUN.sub("\n", value)


def convert_to_markdown(html: str) -> str:
    """Re-parse an HTML fragment and render it as markdown."""
    return _CONVERTER.convert_soup(BeautifulSoup(html, "lxml"))


def normalize(result: ExtractionResult, mode: OutputMode) -> ExtractionResult:
    """Apply *mode* to *result*.

    Article content is either cleaned (content and text) or converted to
    markdown (content only).  Fallback results are returned untouched in
    both modes: their content is already final markdown.
    """
    if isinstance(result, FallbackResult):
        return result
    if isinstance(result, ArticleResult):
        if mode is OutputMode.MARKDOWN:
            return replace(result, content=convert_to_markdown(result.content))
        return replace(
            result,
            content=clean_string(result.content),
            text_content=clean_string(result.text_content),
        )
    raise TypeError(f"Unsupported extraction result: {type(result).__name__}")
