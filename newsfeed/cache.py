"""Single-record, time-expiring JSON cache for the scraped news list.

File layout::

    {
      "timestamp": 1718000000000,
      "data": [ {"title": ..., "link": ..., "image": ..., "content": ..., "content_error": ...} ]
    }

``timestamp`` is the write time in epoch milliseconds.  The whole file is
replaced on every :meth:`NewsCache.store`; there is no merging.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from pathlib import Path
from typing import Callable, Iterable, List

from newsfeed.scraper.models import Article, CacheRecord

logger = logging.getLogger(__name__)


class NewsCache:
    """Time-expiring cache backed by one JSON file.

    Not safe against concurrent writers in the sense of merging; each
    :meth:`store` atomically replaces the file, so the last writer wins.

    Attributes:
        cache_file: Path of the backing JSON file.
        expiry_ms: Maximum record age in milliseconds.
    """

    def __init__(
        self,
        cache_file: Path | str = "news_cache.json",
        expire_hours: float = 2,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.cache_file = Path(cache_file)
        self.expiry_ms = int(expire_hours * 3600 * 1000)
        self._clock = clock

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------
    def load(self) -> CacheRecord | None:
        """Return the cached record, or ``None`` if absent, malformed, or expired."""
        if not self.cache_file.exists():
            return None
        try:
            raw = self.cache_file.read_text(encoding="utf-8")
            if not raw.strip():
                return None
            payload = json.loads(raw)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("[CACHE] Ignoring unreadable cache file %s: %s", self.cache_file, exc)
            return None

        if not isinstance(payload, dict):
            return None
        timestamp = payload.get("timestamp")
        data = payload.get("data")
        if not isinstance(timestamp, int) or isinstance(timestamp, bool) or timestamp <= 0:
            return None
        if not isinstance(data, list):
            return None

        if self._now_ms() - timestamp > self.expiry_ms:
            logger.debug("[CACHE] Cache expired (written at %d)", timestamp)
            return None

        try:
            articles = [Article.from_dict(item) for item in data]
        except (AttributeError, ValueError) as exc:
            logger.warning("[CACHE] Ignoring malformed cache entry in %s: %s", self.cache_file, exc)
            return None

        return CacheRecord(timestamp=timestamp, articles=articles)

    def get(self) -> List[Article] | None:
        """Return the cached articles, or ``None`` on a cache miss."""
        record = self.load()
        return record.articles if record is not None else None

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------
    def store(self, articles: Iterable[Article]) -> CacheRecord:
        """Replace the cache file with a freshly timestamped record of *articles*."""
        record = CacheRecord(timestamp=self._now_ms(), articles=list(articles))
        payload = {
            "timestamp": record.timestamp,
            "data": [a.to_dict() for a in record.articles],
        }

        self.cache_file.parent.mkdir(parents=True, exist_ok=True)
        # Write next to the target and rename so readers never see a partial file.
        fd, tmp_name = tempfile.mkstemp(
            dir=self.cache_file.parent, prefix=f".{self.cache_file.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.cache_file)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info("[CACHE] Stored %d article(s) in %s", len(record.articles), self.cache_file)
        return record

    def clear(self) -> None:
        """Delete the cache file if it exists."""
        self.cache_file.unlink(missing_ok=True)
        logger.info("[CACHE] Cleared %s", self.cache_file)
