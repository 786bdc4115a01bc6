"""newsfeed CLI — entry-point for scraping, cache maintenance and the server.

Usage:
    python cli/main.py --help

Commands:
    scrape       → run the scrape-and-cache pipeline, print JSON
    content      → resolve a single article's body
    clear-cache  → delete the cache file
    serve        → run the HTTP API under uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from newsfeed.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
from typing import Optional

import typer

from newsfeed.config import settings
from newsfeed.logging_utils import setup_logging
from newsfeed.pipeline import build_scraper

app = typer.Typer(
    name="newsfeed",
    help="News scraper CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(log_level or settings.log_level)


# ---------------------------------------------------------------------------
# Scrape commands
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    no_cache: bool = typer.Option(False, "--no-cache", help="Clear the cache before scraping."),
) -> None:
    """Scrape the listing pages (or read the cache) and print the result as JSON."""
    scraper = build_scraper(settings)
    if no_cache:
        scraper.clear_cache()

    outcome = scraper.scrape()
    typer.echo(json.dumps(outcome.to_dict(), indent=2, ensure_ascii=False))
    if not outcome.ok:
        raise typer.Exit(1)


@app.command("content")
def content(
    url: str = typer.Option(..., help="Article URL (absolute or root-relative)."),
) -> None:
    """Fetch one article and print its extracted body."""
    scraper = build_scraper(settings)
    result = scraper.fetch_content(url)
    typer.echo(result.message)
    if not result.ok:
        raise typer.Exit(1)


@app.command("clear-cache")
def clear_cache() -> None:
    """Delete the cached news list."""
    build_scraper(settings).clear_cache()
    typer.echo(f"[clear-cache] Removed {settings.cache_file}")


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: HOST or 0.0.0.0)."),
    port: Optional[int] = typer.Option(None, help="Port (default: PORT or 3000)."),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes."),
) -> None:
    """Run the HTTP API."""
    import uvicorn  # noqa: PLC0415

    bind_host = host or settings.host
    bind_port = port or settings.port
    typer.echo(f"[serve] Listening on http://{bind_host}:{bind_port}")
    uvicorn.run(
        "newsfeed.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
