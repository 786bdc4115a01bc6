"""FastAPI application factory.

Lifespan
--------
On startup the app configures logging and builds one :class:`NewsScraper`
from settings, shared across all requests via ``request.app.state.scraper``.
The scraper owns the cache file, so every request sees the same cache.

Routers
-------
The news router is mounted at the root:

    /             — liveness text
    /news         — scraped news list (served from cache when fresh)
    /clear-cache  — drop the cached list
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsfeed import __version__
from newsfeed.config import Settings, settings as default_settings
from newsfeed.logging_utils import setup_logging
from newsfeed.pipeline import build_scraper

from newsfeed.api.routers import news as news_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    cfg = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Build the shared scraper on startup."""
        setup_logging(cfg.log_level)
        app.state.scraper = build_scraper(cfg)
        yield

    app = FastAPI(
        title="newsfeed",
        description=(
            "Scrapes the source site's listing pages, resolves each article's "
            "body text, and serves the result from a time-expiring cache."
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

    app.include_router(news_router.router, tags=["news"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn newsfeed.api.app:app --reload
app = create_app()
