"""Document loading: raw HTML + base URL into a navigable tree."""

from __future__ import annotations

from bs4 import BeautifulSoup

from readerview.scraper.models import ParsedDocument


def load_document(html: str, url: str) -> ParsedDocument:
    """Parse *html* with the lxml backend, keeping *url* for link resolution."""
    return ParsedDocument(url=url, html=html, soup=BeautifulSoup(html, "lxml"))