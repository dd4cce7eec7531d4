"""Scrape endpoints.

Routes
------
POST /scrape          Body: {"url": "https://...", "markdown": false}  → scrape
GET  /scrape/plan     ?url=https://...                                 → rewrite_for_fetch
"""

from __future__ import annotations

from typing import Any

import httpx
from fastapi import APIRouter, HTTPException, Request
from loguru import logger
from pydantic import BaseModel, HttpUrl

from readerview.scraper import OpenGraphError, rewrite_for_fetch, scrape

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeRequest(BaseModel):
    url: HttpUrl
    markdown: bool = False


class FetchPlanResponse(BaseModel):
    url: str
    redirect: str
    user_agent: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("")
async def scrape_endpoint(body: ScrapeRequest, request: Request) -> dict[str, Any]:
    """Fetch a URL and return its readable content.

    ``kind`` in the response tells article results from Open Graph fallbacks.
    """
    url_str = str(body.url)
    client = getattr(request.app.state, "http", None)
    try:
        result = await scrape(url_str, markdown=body.markdown, client=client)
    except (httpx.HTTPError, OpenGraphError) as exc:
        logger.warning(f"Scrape of {url_str} failed: {exc}")
        raise HTTPException(status_code=502, detail=f"Scrape failed: {exc}") from exc

    if result is None:
        raise HTTPException(status_code=404, detail="No extractable content found.")
    return result.to_dict()


@router.get("/plan", response_model=FetchPlanResponse)
def plan_endpoint(url: str) -> dict[str, Any]:
    """Show which URL, redirect policy and user agent a scrape of *url* would use."""
    try:
        plan = rewrite_for_fetch(url)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {"url": plan.url, "redirect": plan.redirect, "user_agent": plan.user_agent}
