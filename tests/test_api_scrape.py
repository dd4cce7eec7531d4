"""Tests for the /scrape and /health API routes.

``scrape`` is patched at the router with an ``AsyncMock`` so no network or
extraction work happens; the router's job is translation to HTTP.
"""

from __future__ import annotations

from typing import Generator
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from readerview.api.app import create_app
from readerview.scraper.models import ArticleResult, FallbackResult
from readerview.scraper.opengraph import OpenGraphError


@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    with TestClient(create_app(), raise_server_exceptions=True) as c:
        yield c


def _article() -> ArticleResult:
    return ArticleResult(
        content="<p>Hello</p>",
        text_content="Hello",
        title="Greeting",
        byline="Jane Doe",
        site_name="Example",
        lang="en",
        length=5,
    )


class TestScrapeEndpoint:
    def test_article_result(self, client: TestClient) -> None:
        with patch(
            "readerview.api.routers.scrape.scrape", new=AsyncMock(return_value=_article())
        ) as mock_scrape:
            resp = client.post("/scrape", json={"url": "https://example.com/post"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["kind"] == "article"
        assert body["content"] == "<p>Hello</p>"
        assert body["textContent"] == "Hello"
        assert body["siteName"] == "Example"
        assert mock_scrape.await_args.args == ("https://example.com/post",)
        assert mock_scrape.await_args.kwargs["markdown"] is False

    def test_markdown_flag_is_forwarded(self, client: TestClient) -> None:
        with patch(
            "readerview.api.routers.scrape.scrape", new=AsyncMock(return_value=_article())
        ) as mock_scrape:
            client.post("/scrape", json={"url": "https://example.com/post", "markdown": True})

        assert mock_scrape.await_args.kwargs["markdown"] is True

    def test_shared_client_is_passed(self, client: TestClient) -> None:
        with patch(
            "readerview.api.routers.scrape.scrape", new=AsyncMock(return_value=_article())
        ) as mock_scrape:
            client.post("/scrape", json={"url": "https://example.com/post"})

        assert isinstance(mock_scrape.await_args.kwargs["client"], httpx.AsyncClient)

    def test_fallback_result(self, client: TestClient) -> None:
        fallback = FallbackResult(content="# Foo\n\nBar\n\n", text_content="raw")
        with patch("readerview.api.routers.scrape.scrape", new=AsyncMock(return_value=fallback)):
            resp = client.post("/scrape", json={"url": "https://example.com/"})

        assert resp.status_code == 200
        assert resp.json() == {
            "kind": "fallback",
            "content": "# Foo\n\nBar\n\n",
            "textContent": "raw",
        }

    def test_no_content_is_404(self, client: TestClient) -> None:
        with patch("readerview.api.routers.scrape.scrape", new=AsyncMock(return_value=None)):
            resp = client.post("/scrape", json={"url": "https://example.com/"})
        assert resp.status_code == 404

    @pytest.mark.parametrize(
        "error",
        [httpx.ConnectError("refused"), OpenGraphError("timed out")],
    )
    def test_upstream_failures_are_502(self, client: TestClient, error: Exception) -> None:
        with patch(
            "readerview.api.routers.scrape.scrape", new=AsyncMock(side_effect=error)
        ):
            resp = client.post("/scrape", json={"url": "https://example.com/"})
        assert resp.status_code == 502
        assert "Scrape failed" in resp.json()["detail"]

    def test_invalid_url_is_422(self, client: TestClient) -> None:
        resp = client.post("/scrape", json={"url": "not-a-url"})
        assert resp.status_code == 422


class TestPlanEndpoint:
    def test_rewritten_host(self, client: TestClient) -> None:
        resp = client.get("/scrape/plan", params={"url": "https://x.com/jack/status/20"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["url"] == "https://fxtwitter.com/jack/status/20"
        assert body["redirect"] == "manual"
        assert "Googlebot" in body["user_agent"]

    def test_relative_url_is_422(self, client: TestClient) -> None:
        resp = client.get("/scrape/plan", params={"url": "/just/a/path"})
        assert resp.status_code == 422


def test_health(client: TestClient) -> None:
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
