"""Pre-fetch URL rewriting.

Some hosts serve script-heavy markup that no extractor can read.  Those are
mapped onto rendering-friendly mirrors, and redirects are not followed on the
mirror so that it cannot bounce us back to the original host.
"""

from __future__ import annotations

from typing import Optional, Tuple
from urllib.parse import urlsplit, urlunsplit

from loguru import logger

from readerview.config import settings
from readerview.scraper.models import FetchPlan, HostRewriteRule

# Evaluated top to bottom, first match wins.
REWRITE_RULES: Tuple[HostRewriteRule, ...] = (
    HostRewriteRule.for_hosts(
        r"^(?:.*\.)?(twitter\.com|x\.com)$", settings.twitter_mirror_host
    ),
    HostRewriteRule.for_hosts(
        r"^(?:.*\.)?(www\.)?(reddit\.com|redd\.it)$", settings.reddit_mirror_host
    ),
)


def _match_rule(host: str) -> Optional[HostRewriteRule]:
    for rule in REWRITE_RULES:
        if rule.matches(host):
            return rule
    return None


def _replace_host(url: str, new_host: str) -> str:
    """Return *url* with its hostname swapped, keeping userinfo and port."""
    parts = urlsplit(url)
    netloc = new_host
    if parts.port is not None:
        netloc = f"{netloc}:{parts.port}"
    if parts.username is not None:
        userinfo = parts.username
        if parts.password is not None:
            userinfo = f"{userinfo}:{parts.password}"
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


def rewrite_for_fetch(url: str) -> FetchPlan:
    """Decide which URL to request for *url*, and how.

    Raises:
        ValueError: If *url* is not an absolute URL with a scheme and host.
    """
    url = url.strip()
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        raise ValueError(f"URL must include scheme and domain: {url!r}")

    rule = _match_rule(parts.hostname)
    if rule is None:
        return FetchPlan(url=url, redirect="follow", user_agent=settings.user_agent)

    rewritten = _replace_host(url, rule.replacement_host)
    logger.debug(f"Rewrote {url} -> {rewritten} (redirect={rule.redirect})")
    return FetchPlan(url=rewritten, redirect=rule.redirect, user_agent=settings.user_agent)
