"""Scraper package — page fetch, URL resolution & content extraction."""

from newsfeed.scraper.extractor import extract_content, extract_summaries
from newsfeed.scraper.fetcher import fetch_html
from newsfeed.scraper.models import (
    Article,
    CacheRecord,
    ContentFailure,
    ContentResult,
    NewsError,
    ScrapeOutcome,
)
from newsfeed.scraper.selectors import DEFAULT_SELECTORS, SelectorConfig, load_selectors
from newsfeed.scraper.urls import resolve_url

__all__ = [
    "fetch_html",
    "extract_summaries",
    "extract_content",
    "resolve_url",
    "Article",
    "CacheRecord",
    "ContentFailure",
    "ContentResult",
    "NewsError",
    "ScrapeOutcome",
    "SelectorConfig",
    "DEFAULT_SELECTORS",
    "load_selectors",
]
