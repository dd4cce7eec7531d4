"""Scraper package: fetch, classify, extract and normalise readable content."""

from readerview.scraper.fetcher import fetch_url
from readerview.scraper.models import (
    ArticleResult,
    ExtractionResult,
    FallbackResult,
    OgMetadata,
    OutputMode,
    RawPage,
)
from readerview.scraper.opengraph import OpenGraphError
from readerview.scraper.pipeline import extract, scrape
from readerview.scraper.rewrite import rewrite_for_fetch

__all__ = [
    "scrape",
    "extract",
    "fetch_url",
    "rewrite_for_fetch",
    "ArticleResult",
    "FallbackResult",
    "ExtractionResult",
    "OgMetadata",
    "OutputMode",
    "RawPage",
    "OpenGraphError",
]
