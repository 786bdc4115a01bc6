"""Extraction: listing pages into :class:`Article` cards, article pages into body text."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, Tag

from newsfeed.scraper.models import Article, ContentFailure, ContentResult
from newsfeed.scraper.selectors import DEFAULT_SELECTORS, SelectorConfig
from newsfeed.scraper.urls import resolve_url

ELLIPSIS = "..."


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _joined_text(root: BeautifulSoup | Tag, selector: str) -> str:
    """Concatenate the text of every node under *root* matching *selector*, trimmed."""
    return "".join(node.get_text() for node in root.select(selector)).strip()


def _image_source(card: Tag, selector: str) -> str | None:
    """``data-src`` of the first image match, falling back to ``src``."""
    img = card.select_one(selector)
    if img is None:
        return None
    return img.get("data-src") or img.get("src") or None


def _truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_summaries(
    html: str,
    base: str,
    selectors: SelectorConfig = DEFAULT_SELECTORS,
) -> List[Article]:
    """Return one :class:`Article` per article card in *html*, in document order.

    Cards without a title or without a resolvable link are skipped.  The
    image is optional.  Nothing is de-duplicated.
    """
    soup = BeautifulSoup(html, "html.parser")
    articles: List[Article] = []

    for card in soup.select(selectors.card):
        title = _joined_text(card, selectors.title)
        anchor = card.select_one(selectors.link)
        href = anchor.get("href") if anchor is not None else None
        link = resolve_url(base, href)
        if not title or not link:
            continue

        articles.append(
            Article(
                title=title,
                link=link,
                image=resolve_url(base, _image_source(card, selectors.image)),
            )
        )

    return articles


def extract_content(html: str, selectors: SelectorConfig = DEFAULT_SELECTORS) -> ContentResult:
    """Pull an article's body text out of its full page.

    Content selectors are tried in order; the first whose text is longer than
    ``min_content_length`` wins, which skips empty or placeholder containers.
    Text longer than ``max_content_length`` is cut and suffixed with ``...``.
    """
    soup = BeautifulSoup(html, "html.parser")

    for selector in selectors.content:
        text = _joined_text(soup, selector)
        if len(text) > selectors.min_content_length:
            return ContentResult.success(_truncate(text, selectors.max_content_length))

    return ContentResult.failed(ContentFailure.NOT_FOUND)
