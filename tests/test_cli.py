"""Tests for the newsfeed CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app
from newsfeed.cache import NewsCache
from newsfeed.pipeline import NewsScraper

runner = CliRunner()

BASE = "https://site.test"

_LISTING = (
    '<html><body><article class="rectangle_container__rBE5L">'
    '<a href="/news/1"><h4 class="rectangle_news_title__VvUoG">CLI headline</h4></a>'
    "</article></body></html>"
)
_ARTICLE = f'<html><body><div class="news-text">{"text " * 20}</div></body></html>'


@pytest.fixture
def pages():
    return {f"{BASE}/": _LISTING, f"{BASE}/news/1": _ARTICLE}


@pytest.fixture
def scraper(tmp_path, monkeypatch, pages):
    """Scraper over a fake site; the CLI's builder is patched to return it."""
    scraper = NewsScraper(
        cache=NewsCache(tmp_path / "news_cache.json"),
        base_url=BASE,
        fetch=pages.get,
    )
    monkeypatch.setattr("cli.main.build_scraper", lambda cfg: scraper)
    monkeypatch.setattr("cli.main.setup_logging", lambda level: None)
    return scraper


def test_scrape_prints_json(scraper):
    result = runner.invoke(app, ["scrape"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["news"][0]["title"] == "CLI headline"
    assert payload["news"][0]["content"] == ("text " * 20).strip()
    assert scraper.cache.cache_file.exists()


def test_scrape_no_cache_rescrapes(scraper, pages):
    runner.invoke(app, ["scrape"])
    pages[f"{BASE}/news/1"] = None

    result = runner.invoke(app, ["scrape", "--no-cache"])

    assert result.exit_code == 0
    item = json.loads(result.stdout)["news"][0]
    assert item["content_error"] == "fetch_failed"


def test_scrape_no_news_exits_nonzero(scraper, pages):
    pages.clear()

    result = runner.invoke(app, ["scrape"])

    assert result.exit_code == 1
    assert json.loads(result.stdout) == {"error": "No news found."}


def test_content_command(scraper):
    result = runner.invoke(app, ["content", "--url", "/news/1"])
    assert result.exit_code == 0
    assert "text text" in result.stdout


def test_content_command_failure(scraper):
    result = runner.invoke(app, ["content", "--url", "news/1"])
    assert result.exit_code == 1
    assert "Invalid news link" in result.stdout


def test_clear_cache_command(scraper):
    runner.invoke(app, ["scrape"])
    assert scraper.cache.cache_file.exists()

    result = runner.invoke(app, ["clear-cache"])

    assert result.exit_code == 0
    assert not scraper.cache.cache_file.exists()
