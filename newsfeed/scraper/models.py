"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List


class ContentFailure(str, Enum):
    """Why an article's body could not be resolved."""

    INVALID_LINK = "invalid_link"
    FETCH_FAILED = "fetch_failed"
    NOT_FOUND = "content_not_found"

    @property
    def message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES = {
    ContentFailure.INVALID_LINK: "Invalid news link",
    ContentFailure.FETCH_FAILED: "Could not fetch content",
    ContentFailure.NOT_FOUND: "Content section not found",
}


class NewsError(str, Enum):
    """Pipeline-level failure outcomes."""

    NO_NEWS = "no_news_found"

    @property
    def message(self) -> str:
        return "No news found."


@dataclass(frozen=True)
class ContentResult:
    """Either the extracted body text or the reason there is none."""

    text: str | None = None
    failure: ContentFailure | None = None

    @classmethod
    def success(cls, text: str) -> "ContentResult":
        return cls(text=text)

    @classmethod
    def failed(cls, failure: ContentFailure) -> "ContentResult":
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def message(self) -> str:
        """Body text on success, human-readable failure reason otherwise."""
        if self.failure is not None:
            return f"Error: {self.failure.message}"
        return self.text or ""


@dataclass
class Article:
    """One article card from a listing page, plus its resolved body.

    ``content`` is ``None`` until the pipeline has resolved it.
    """

    title: str
    link: str
    image: str | None = None
    content: ContentResult | None = None

    # ------------------------------------------------------------------
    # Serialisation (API responses and the cache file share this shape)
    # ------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        content = self.content
        return {
            "title": self.title,
            "link": self.link,
            "image": self.image,
            "content": content.text if content is not None else None,
            "content_error": (
                content.failure.value
                if content is not None and content.failure is not None
                else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Article":
        """Rebuild an :class:`Article` from :meth:`to_dict` output.

        Raises:
            ValueError: If required fields are missing or mistyped, or
                ``content_error`` names an unknown failure kind.
        """
        title = data.get("title")
        link = data.get("link")
        image = data.get("image")
        if not isinstance(title, str) or not title:
            raise ValueError("article is missing a title")
        if not isinstance(link, str) or not link:
            raise ValueError("article is missing a link")
        if image is not None and not isinstance(image, str):
            raise ValueError("article image must be a string or null")

        text = data.get("content")
        error = data.get("content_error")
        content: ContentResult | None = None
        if error is not None:
            content = ContentResult.failed(ContentFailure(error))
        elif isinstance(text, str):
            content = ContentResult.success(text)

        return cls(title=title, link=link, image=image, content=content)


@dataclass
class CacheRecord:
    """The single record held in the cache file."""

    timestamp: int
    articles: List[Article] = field(default_factory=list)


@dataclass
class ScrapeOutcome:
    """Result of one pipeline run: articles on success, a named error otherwise."""

    articles: List[Article] = field(default_factory=list)
    error: NewsError | None = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"error": self.error.message}
        return {"news": [a.to_dict() for a in self.articles]}
