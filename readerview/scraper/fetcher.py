"""Async HTTP fetcher that honours the host rewrite policy."""

from __future__ import annotations

from typing import Optional

import httpx
from loguru import logger

from readerview.config import settings
from readerview.scraper.models import FetchPlan, RawPage
from readerview.scraper.rewrite import rewrite_for_fetch


async def _get(client: httpx.AsyncClient, plan: FetchPlan) -> httpx.Response:
    response = await client.get(
        plan.url,
        headers={"User-Agent": plan.user_agent},
        follow_redirects=plan.follow_redirects,
    )
    # A 3xx under the manual policy is handed on as-is, only errors raise.
    if response.is_error:
        response.raise_for_status()
    return response


async def fetch_url(url: str, client: Optional[httpx.AsyncClient] = None) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    The request goes to the URL chosen by
    :func:`~readerview.scraper.rewrite.rewrite_for_fetch`, but the returned
    page keeps the caller's *url* so relative links resolve against it.
    An injected *client* is used as-is and left open.

    Raises:
        ValueError: If *url* is not absolute.
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.HTTPError: For transport failures and timeouts.
    """
    url = url.strip()
    plan = rewrite_for_fetch(url)
    logger.debug(f"Fetching {plan.url} (redirect={plan.redirect})")

    if client is not None:
        response = await _get(client, plan)
    else:
        async with httpx.AsyncClient(timeout=settings.request_timeout) as own_client:
            response = await _get(own_client, plan)

    return RawPage(url=url, html=response.text, status_code=response.status_code)
