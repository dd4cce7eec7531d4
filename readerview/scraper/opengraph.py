"""Social-metadata fallback for pages that are not article-like.

Open Graph tags (with Twitter-card and plain ``<meta>`` fallbacks) are read
from the raw HTML and rendered into a small markdown document.
"""

from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from dateutil import parser as dtparse
from dateutil import tz
from loguru import logger

from readerview.config import settings
from readerview.scraper.models import FallbackResult, OgMetadata, ParsedDocument

# Locale-independent month names for deterministic dates
_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_TITLE_KEYS = ("og:title", "twitter:title")
_DESCRIPTION_KEYS = ("og:description", "twitter:description", "description")
_DATE_KEYS = ("og:date", "article:published_time", "article:modified_time")
_IMAGE_KEYS = ("og:image", "og:image:url", "og:image:secure_url", "twitter:image")


class OpenGraphError(RuntimeError):
    """Raised when Open Graph tags could not be read in time."""


# ---------------------------------------------------------------------------
# Tag reading
# ---------------------------------------------------------------------------

def _meta_content(soup: BeautifulSoup, keys: Sequence[str]) -> Optional[str]:
    """First non-blank ``content`` of a ``<meta>`` whose property or name is in *keys*."""
    for key in keys:
        for attr in ("property", "name"):
            for tag in soup.find_all("meta", attrs={attr: key}):
                content = (tag.get("content") or "").strip()
                if content:
                    return content
    return None


def _title_tag(soup: BeautifulSoup) -> Optional[str]:
    if soup.title is None:
        return None
    return soup.title.get_text().strip() or None


def _image_src_link(soup: BeautifulSoup) -> Optional[str]:
    link = soup.find("link", rel="image_src")
    if link is None:
        return None
    return (link.get("href") or "").strip() or None


def read_og_tags(html: str) -> OgMetadata:
    """Synchronously read Open Graph metadata from *html*."""
    soup = BeautifulSoup(html, "lxml")
    return OgMetadata(
        title=_meta_content(soup, _TITLE_KEYS) or _title_tag(soup),
        description=_meta_content(soup, _DESCRIPTION_KEYS),
        date=_meta_content(soup, _DATE_KEYS),
        image_url=_meta_content(soup, _IMAGE_KEYS) or _image_src_link(soup),
    )


async def parse_og(html: str, timeout: Optional[float] = None) -> OgMetadata:
    """Read Open Graph metadata off the event loop, bounded by *timeout* seconds.

    Raises:
        OpenGraphError: If reading does not finish within the timeout.
    """
    limit = settings.og_timeout if timeout is None else timeout
    try:
        return await asyncio.wait_for(asyncio.to_thread(read_og_tags, html), timeout=limit)
    except asyncio.TimeoutError as exc:
        raise OpenGraphError(f"Open Graph parsing timed out after {limit}s") from exc


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def format_og_date(value: str) -> Optional[str]:
    """Render *value* as ``"Month D, YYYY"`` in UTC, or ``None`` if unparseable.

    Naive timestamps are taken to be UTC already.
    """
    try:
        parsed: datetime = dtparse.parse(value)
    except (ValueError, OverflowError) as exc:
        logger.warning(f"Ignoring unparseable og date {value!r}: {exc}")
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz.UTC)
    else:
        parsed = parsed.astimezone(tz.UTC)
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def og_to_markdown(og: OgMetadata) -> str:
    """Title, date, thumbnail, description, in that order; absent fields are skipped."""
    sections = []
    if og.title:
        sections.append(f"# {og.title}")
    if og.date:
        formatted = format_og_date(og.date)
        if formatted:
            sections.append(f"*{formatted}*")
    if og.image_url:
        sections.append(f"![Thumbnail]({og.image_url})")
    if og.description:
        sections.append(og.description)
    return "".join(f"{section}\n\n" for section in sections)


async def extract_fallback(document: ParsedDocument) -> FallbackResult:
    """Build a :class:`FallbackResult` from *document*'s social metadata.

    Open Graph failures propagate to the caller.
    """
    og = await parse_og(document.html)
    if og.image_url and document.url:
        og = replace(og, image_url=urljoin(document.url, og.image_url))
    return FallbackResult(content=og_to_markdown(og), text_content=document.body_text)
