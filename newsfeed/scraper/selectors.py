"""CSS selectors describing the source site's markup.

The selectors are plain data so that a markup change on the site can be
handled with a JSON file (``NEWS_SELECTORS_FILE``) instead of a code change.
A selectors file is a JSON object whose keys override the defaults, e.g.::

    {
        "content": [".article-body", "#body"],
        "max_content_length": 800
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Tuple


@dataclass(frozen=True)
class SelectorConfig:
    card: str = "article.rectangle_container__rBE5L"
    title: str = "h4.rectangle_news_title__VvUoG"
    link: str = "a"
    image: str = "img.rectangle_news_image__fcCG2"
    # Most specific / known-good first, generic fallbacks last.
    content: Tuple[str, ...] = (
        ".single_content_text__4h66M",
        "div.news-text",
        "div.article-content",
        'div[itemprop="articleBody"]',
        ".content_content__sfzd5",
        "#body",
        "#news_content_body",
    )
    min_content_length: int = 50
    max_content_length: int = 500


DEFAULT_SELECTORS = SelectorConfig()


def selectors_from_dict(data: dict[str, Any], base: SelectorConfig = DEFAULT_SELECTORS) -> SelectorConfig:
    """Return *base* with the keys of *data* overridden.

    Raises:
        ValueError: On unknown keys or values of the wrong type.
    """
    known = {f.name for f in fields(SelectorConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown selector keys: {', '.join(sorted(unknown))}")

    overrides: dict[str, Any] = {}
    for key, value in data.items():
        if key == "content":
            if not isinstance(value, list) or not all(isinstance(s, str) for s in value):
                raise ValueError("'content' must be a list of CSS selector strings")
            overrides[key] = tuple(value)
        elif key in ("min_content_length", "max_content_length"):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{key!r} must be an integer")
            overrides[key] = value
        else:
            if not isinstance(value, str) or not value:
                raise ValueError(f"{key!r} must be a non-empty CSS selector string")
            overrides[key] = value

    return replace(base, **overrides)


def load_selectors(path: Path | str | None) -> SelectorConfig:
    """Load a :class:`SelectorConfig` from a JSON file, or the defaults if *path* is ``None``."""
    if path is None:
        return DEFAULT_SELECTORS
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Selectors file {path} must contain a JSON object")
    return selectors_from_dict(data)
