"""readerview CLI: entry-point for scraping from the terminal.

Usage:
    python cli/main.py --help

Commands:
    scrape   → fetch a URL and print its readable content
    plan     → show the URL / redirect policy / user agent a scrape would use
    serve    → run the HTTP API with uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from readerview.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import json

import httpx
import typer

from readerview.log_config import configure_logging
from readerview.scraper import ArticleResult, OpenGraphError, rewrite_for_fetch, scrape

app = typer.Typer(
    name="readerview",
    help="Readable content extraction for web pages.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level for stderr output."),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level=log_level)


@app.command("scrape")
def scrape_cmd(
    url: str = typer.Option(..., help="URL to scrape."),
    markdown: bool = typer.Option(False, "--markdown", help="Convert article HTML to markdown."),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON."),
) -> None:
    """Scrape a URL and print its readable content to stdout."""
    typer.echo(f"[scrape] Fetching {url!r} …", err=True)
    try:
        result = asyncio.run(scrape(url, markdown=markdown))
    except ValueError as exc:
        typer.echo(f"[scrape] Invalid URL: {exc}", err=True)
        raise typer.Exit(1)
    except (httpx.HTTPError, OpenGraphError) as exc:
        typer.echo(f"[scrape] Failed: {exc}", err=True)
        raise typer.Exit(1)

    if result is None:
        typer.echo("[scrape] No extractable content found.", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    if isinstance(result, ArticleResult):
        typer.echo(f"[scrape] Title  : {result.title or '(none)'}", err=True)
        typer.echo(f"[scrape] Byline : {result.byline or '(none)'}", err=True)
        typer.echo(f"[scrape] Length : {result.length}", err=True)
    else:
        typer.echo("[scrape] Not article-like; showing Open Graph summary.", err=True)
    typer.echo(result.content)


@app.command("plan")
def plan_cmd(
    url: str = typer.Argument(..., help="URL to inspect."),
) -> None:
    """Show how a URL would be fetched after host rewriting."""
    try:
        plan = rewrite_for_fetch(url)
    except ValueError as exc:
        typer.echo(f"[plan] Invalid URL: {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(f"url        : {plan.url}")
    typer.echo(f"redirect   : {plan.redirect}")
    typer.echo(f"user-agent : {plan.user_agent}")


@app.command("serve")
def serve_cmd(
    host: str = typer.Option("127.0.0.1", help="Bind address."),
    port: int = typer.Option(8000, help="Bind port."),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("readerview.api.app:app", host=host, port=port)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
