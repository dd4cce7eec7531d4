"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging and opens a single
``httpx.AsyncClient`` (shared across all requests via
``request.app.state.http``).  On shutdown it closes the client cleanly.

Routers
-------
    /scrape    - readable content extraction
    /health    - liveness probe
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from readerview import __version__
from readerview.api.routers import scrape as scrape_router
from readerview.config import settings
from readerview.log_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared HTTP client on startup and close it on shutdown."""
    configure_logging()
    client = httpx.AsyncClient(timeout=settings.request_timeout)
    app.state.http = client
    try:
        yield
    finally:
        await client.aclose()


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="readerview API",
        description=(
            "Extracts the readable content of a web page: readability output "
            "for article-like pages, an Open Graph summary for everything else."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(scrape_router.router, prefix="/scrape", tags=["scrape"])

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn readerview.api.app:app --reload
app = create_app()
