"""Scrape-and-cache pipeline.

``NewsScraper.scrape`` runs one request to completion:

    cache check → fetch listing pages → extract cards → cap
        → resolve each article's body → store in cache → return

Listing pages and article bodies are fetched through a bounded
``ThreadPoolExecutor``.  Results are always assembled in listing order, so
the output does not depend on which request finishes first.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from newsfeed.cache import NewsCache
from newsfeed.config import Settings
from newsfeed.scraper.extractor import extract_content, extract_summaries
from newsfeed.scraper.fetcher import fetch_html
from newsfeed.scraper.models import (
    Article,
    ContentFailure,
    ContentResult,
    NewsError,
    ScrapeOutcome,
)
from newsfeed.scraper.selectors import DEFAULT_SELECTORS, SelectorConfig, load_selectors
from newsfeed.scraper.urls import resolve_url

logger = logging.getLogger(__name__)

# Comment-sorted, home, most-visited; accumulation follows this order.
DEFAULT_PAGES = ("/?type=comment", "/", "/most-visited")

Fetch = Callable[[str], Optional[str]]


class NewsScraper:
    """Scrape the source site's listing pages behind a :class:`NewsCache`.

    Args:
        cache: Cache consulted before, and written after, every scrape.
        base_url: Origin of the source site, e.g. ``https://example.com``.
        pages: Listing-page paths relative to *base_url*, in accumulation order.
        news_limit: Maximum number of articles kept per scrape.
        selectors: Markup description for cards and article bodies.
        max_workers: Upper bound on concurrent HTTP requests; ``1`` fetches
            everything sequentially.
        fetch: ``url -> body | None`` callable, :func:`fetch_html` by default.
    """

    def __init__(
        self,
        cache: NewsCache,
        base_url: str,
        pages: Sequence[str] = DEFAULT_PAGES,
        news_limit: int = 50,
        selectors: SelectorConfig = DEFAULT_SELECTORS,
        max_workers: int = 8,
        fetch: Fetch = fetch_html,
    ) -> None:
        self.cache = cache
        self.base_url = base_url.rstrip("/")
        self.pages = tuple(pages)
        self.news_limit = news_limit
        self.selectors = selectors
        self.max_workers = max(1, max_workers)
        self._fetch = fetch

    # ------------------------------------------------------------------
    # Single article
    # ------------------------------------------------------------------
    def fetch_content(self, link: str | None) -> ContentResult:
        """Fetch one article page and extract its body."""
        url = resolve_url(self.base_url, link)
        if url is None:
            return ContentResult.failed(ContentFailure.INVALID_LINK)

        html = self._fetch(url)
        if not html:
            return ContentResult.failed(ContentFailure.FETCH_FAILED)

        return extract_content(html, self.selectors)

    # ------------------------------------------------------------------
    # Listing pages
    # ------------------------------------------------------------------
    def _page_summaries(self, path: str) -> List[Article]:
        """Cards from one listing page; a page that fails in any way yields none."""
        url = self.base_url + path
        try:
            html = self._fetch(url)
            if not html:
                logger.info("[SCRAPE] Skipping listing page %s", url)
                return []
            found = extract_summaries(html, self.base_url, self.selectors)
        except Exception:
            logger.exception("[SCRAPE] Listing page %s failed, skipping it", url)
            return []
        logger.info("[SCRAPE] %s → %d article(s)", url, len(found))
        return found

    def collect_summaries(self, pool: ThreadPoolExecutor) -> List[Article]:
        """Fetch every listing page and return their cards in fixed page order."""
        articles: List[Article] = []
        # pool.map yields in submission order, whatever the completion order.
        for found in pool.map(self._page_summaries, self.pages):
            articles.extend(found)
        return articles

    # ------------------------------------------------------------------
    # Article bodies
    # ------------------------------------------------------------------
    def resolve_contents(self, pool: ThreadPoolExecutor, articles: List[Article]) -> None:
        """Fill in ``content`` on every article, in place.

        A task that raises only affects its own article, which is marked as
        ``FETCH_FAILED``; everything already resolved is kept.
        """
        futures = [pool.submit(self.fetch_content, a.link) for a in articles]
        for article, future in zip(articles, futures):
            try:
                article.content = future.result()
            except Exception:
                logger.exception("[SCRAPE] Content resolution failed for %s", article.link)
                article.content = ContentResult.failed(ContentFailure.FETCH_FAILED)

    # ------------------------------------------------------------------
    # Full pipeline
    # ------------------------------------------------------------------
    def scrape(self) -> ScrapeOutcome:
        """Return the cached news list, or scrape, cache and return a fresh one."""
        cached = self.cache.get()
        if cached is not None:
            logger.info("[SCRAPE] Cache hit: %d article(s)", len(cached))
            return ScrapeOutcome(articles=cached, from_cache=True)

        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="newsfeed") as pool:
            articles = self.collect_summaries(pool)
            if not articles:
                logger.warning("[SCRAPE] No articles found on any listing page")
                return ScrapeOutcome(error=NewsError.NO_NEWS)

            articles = articles[: self.news_limit]
            self.resolve_contents(pool, articles)

        self.cache.store(articles)
        return ScrapeOutcome(articles=articles)

    def clear_cache(self) -> None:
        self.cache.clear()


def build_scraper(settings: Settings) -> NewsScraper:
    """Wire a :class:`NewsScraper` from application settings."""
    return NewsScraper(
        cache=NewsCache(settings.cache_file, settings.cache_expire_hours),
        base_url=settings.base_url,
        news_limit=settings.news_limit,
        selectors=load_selectors(settings.selectors_file),
        max_workers=settings.max_workers,
    )
