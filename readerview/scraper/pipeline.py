"""The scrape pipeline.

``scrape`` chains every stage for one URL:

    rewrite + fetch → load → classify → article | fallback → normalize

Each call is independent: nothing is cached or shared between calls, and
nothing is retried.  Network and Open Graph failures propagate; "nothing
worth extracting" is reported as ``None``.
"""

from __future__ import annotations

from typing import Optional

import httpx
from loguru import logger

from readerview.scraper.article import extract_article
from readerview.scraper.classifier import is_article_like
from readerview.scraper.document import load_document
from readerview.scraper.fetcher import fetch_url
from readerview.scraper.models import ExtractionResult, OutputMode
from readerview.scraper.normalizer import normalize
from readerview.scraper.opengraph import extract_fallback


async def extract(html: str, url: str) -> Optional[ExtractionResult]:
    """Extract content from already-fetched *html* served at *url*."""
    document = load_document(html, url)

    if is_article_like(document):
        logger.info(f"{url}: article-like, running readability")
        return extract_article(document)

    logger.info(f"{url}: not article-like, falling back to Open Graph tags")
    return await extract_fallback(document)


async def scrape(
    url: str,
    markdown: bool = False,
    client: Optional[httpx.AsyncClient] = None,
) -> Optional[ExtractionResult]:
    """Fetch *url* and return its readable content.

    Args:
        url: Absolute URL of the page.
        markdown: Convert article HTML to markdown instead of cleaning
            whitespace.
        client: Optional shared ``httpx.AsyncClient``; left open.

    Returns:
        An :class:`~readerview.scraper.models.ArticleResult` or
        :class:`~readerview.scraper.models.FallbackResult`, or ``None`` when
        no extractable content was found.

    Raises:
        ValueError: If *url* is not absolute.
        httpx.HTTPError: If the page fetch fails.
        readerview.scraper.opengraph.OpenGraphError: If Open Graph parsing
            times out.
    """
    raw = await fetch_url(url, client=client)
    result = await extract(raw.html, raw.url)
    if result is None:
        logger.info(f"{url}: no extractable content")
        return None
    return normalize(result, OutputMode.from_flag(markdown))
