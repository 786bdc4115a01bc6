"""Tests for the JSON file cache (expiry, malformed files, store/clear)."""

from __future__ import annotations

import json

import pytest

from newsfeed.cache import NewsCache
from newsfeed.scraper.models import Article, ContentFailure, ContentResult

HOUR = 3600


class FakeClock:
    def __init__(self, now: float = 1_700_000_000) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(tmp_path, clock) -> NewsCache:
    return NewsCache(tmp_path / "news_cache.json", expire_hours=2, clock=clock)


def _articles() -> list[Article]:
    return [
        Article(
            title="خبر اول",
            link="https://site.test/news/1",
            image="https://site.test/img/1.jpg",
            content=ContentResult.success("متن خبر"),
        ),
        Article(
            title="Second",
            link="https://site.test/news/2",
            content=ContentResult.failed(ContentFailure.NOT_FOUND),
        ),
    ]


# ---------------------------------------------------------------------------
# store / load
# ---------------------------------------------------------------------------

class TestStoreAndLoad:
    def test_missing_file_is_a_miss(self, cache) -> None:
        assert cache.load() is None
        assert cache.get() is None

    def test_store_then_load_returns_same_articles(self, cache) -> None:
        stored = cache.store(_articles())
        record = cache.load()

        assert record is not None
        assert record.timestamp == stored.timestamp
        assert record.articles == _articles()
        assert cache.get() == _articles()

    def test_empty_list_round_trips(self, cache) -> None:
        cache.store([])
        assert cache.get() == []

    def test_store_replaces_previous_record(self, cache) -> None:
        cache.store(_articles())
        cache.store(_articles()[:1])
        assert cache.get() == _articles()[:1]

    def test_file_format(self, cache, clock) -> None:
        cache.store(_articles())
        raw = cache.cache_file.read_text(encoding="utf-8")
        payload = json.loads(raw)

        assert payload["timestamp"] == int(clock.now * 1000)
        assert payload["data"][0] == {
            "title": "خبر اول",
            "link": "https://site.test/news/1",
            "image": "https://site.test/img/1.jpg",
            "content": "متن خبر",
            "content_error": None,
        }
        assert payload["data"][1]["content"] is None
        assert payload["data"][1]["content_error"] == "content_not_found"
        # Pretty-printed with non-ASCII text kept as-is.
        assert '\n  "timestamp"' in raw
        assert "خبر اول" in raw

    def test_creates_parent_directory(self, tmp_path, clock) -> None:
        cache = NewsCache(tmp_path / "nested" / "dir" / "cache.json", clock=clock)
        cache.store(_articles())
        assert cache.get() == _articles()

    def test_no_temp_files_left_behind(self, cache) -> None:
        cache.store(_articles())
        assert [p.name for p in cache.cache_file.parent.iterdir()] == ["news_cache.json"]


# ---------------------------------------------------------------------------
# Expiry
# ---------------------------------------------------------------------------

class TestExpiry:
    def test_within_window_is_a_hit(self, cache, clock) -> None:
        cache.store(_articles())
        clock.now += 2 * HOUR
        assert cache.get() == _articles()

    def test_past_window_is_a_miss(self, cache, clock) -> None:
        cache.store(_articles())
        clock.now += 2 * HOUR + 1
        assert cache.load() is None

    def test_custom_expiry(self, tmp_path, clock) -> None:
        cache = NewsCache(tmp_path / "c.json", expire_hours=0.5, clock=clock)
        cache.store(_articles())
        clock.now += HOUR
        assert cache.get() is None


# ---------------------------------------------------------------------------
# Malformed files
# ---------------------------------------------------------------------------

class TestMalformed:
    @pytest.mark.parametrize(
        "content",
        [
            "",
            "   \n",
            "not json",
            "[]",
            '{"data": []}',
            '{"timestamp": 1700000000000}',
            '{"timestamp": "1700000000000", "data": []}',
            '{"timestamp": 0, "data": []}',
            '{"timestamp": 1700000000000, "data": {}}',
            '{"timestamp": 1700000000000, "data": [{"title": "no link"}]}',
            '{"timestamp": 1700000000000, "data": ["string"]}',
            '{"timestamp": 1700000000000, "data": [{"title": "t", "link": "l", "content_error": "bogus"}]}',
        ],
    )
    def test_malformed_file_is_a_miss(self, cache, content) -> None:
        cache.cache_file.write_text(content, encoding="utf-8")
        assert cache.load() is None

    def test_unreadable_path_is_a_miss(self, cache) -> None:
        cache.cache_file.mkdir()
        assert cache.load() is None

    def test_malformed_file_heals_on_store(self, cache) -> None:
        cache.cache_file.write_text("garbage", encoding="utf-8")
        cache.store(_articles())
        assert cache.get() == _articles()


# ---------------------------------------------------------------------------
# clear
# ---------------------------------------------------------------------------

class TestClear:
    def test_clear_removes_record(self, cache) -> None:
        cache.store(_articles())
        cache.clear()
        assert not cache.cache_file.exists()
        assert cache.load() is None

    def test_clear_without_file_is_noop(self, cache) -> None:
        cache.clear()
        assert cache.load() is None
