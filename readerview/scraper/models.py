"""Data models for the scraper pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Optional, Union

from bs4 import BeautifulSoup

Redirect = Literal["follow", "manual"]


@dataclass(frozen=True)
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class ParsedDocument:
    """A navigable tree over a :class:`RawPage`'s HTML, scoped to one call."""

    url: str
    html: str
    soup: BeautifulSoup

    @property
    def body_text(self) -> str:
        """Text content of ``<body>``, or an empty string when there is none."""
        body = self.soup.body
        if body is None:
            return ""
        return body.get_text()

    @property
    def body_text_length(self) -> int:
        return len(self.body_text)


@dataclass
class OgMetadata:
    """Open Graph fields read from a page.  Every field may be absent."""

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None
    image_url: Optional[str] = None


@dataclass
class ArticleResult:
    """Structured content produced by the readability engine."""

    content: str
    text_content: str
    title: Optional[str] = None
    byline: Optional[str] = None
    excerpt: Optional[str] = None
    site_name: Optional[str] = None
    lang: Optional[str] = None
    length: int = 0
    published_time: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "article",
            "content": self.content,
            "textContent": self.text_content,
            "title": self.title,
            "byline": self.byline,
            "excerpt": self.excerpt,
            "siteName": self.site_name,
            "lang": self.lang,
            "length": self.length,
            "publishedTime": self.published_time,
        }


@dataclass
class FallbackResult:
    """Markdown synthesised from social metadata for non-article pages.

    ``content`` is already final markdown; ``text_content`` is the page's raw
    body text.
    """

    content: str
    text_content: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "fallback",
            "content": self.content,
            "textContent": self.text_content,
        }


ExtractionResult = Union[ArticleResult, FallbackResult]


class OutputMode(Enum):
    """Post-processing applied to an :data:`ExtractionResult`."""

    PLAIN_CLEANUP = "plain"
    MARKDOWN = "markdown"

    @classmethod
    def from_flag(cls, markdown: bool) -> "OutputMode":
        return cls.MARKDOWN if markdown else cls.PLAIN_CLEANUP


@dataclass(frozen=True)
class HostRewriteRule:
    """Maps hosts matching *pattern* onto *replacement_host* before fetching."""

    pattern: re.Pattern[str]
    replacement_host: str
    redirect: Redirect = "manual"

    def matches(self, host: str) -> bool:
        return self.pattern.match(host) is not None

    @classmethod
    def for_hosts(cls, regex: str, replacement_host: str) -> "HostRewriteRule":
        return cls(pattern=re.compile(regex, re.IGNORECASE), replacement_host=replacement_host)


@dataclass(frozen=True)
class FetchPlan:
    """How a URL should be requested: final URL, redirect policy, user agent."""

    url: str
    redirect: Redirect
    user_agent: str

    @property
    def follow_redirects(self) -> bool:
        return self.redirect == "follow"
