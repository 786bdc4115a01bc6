"""HTTP fetcher for listing and article pages."""

from __future__ import annotations

import logging

import httpx

from newsfeed.config import settings

logger = logging.getLogger(__name__)

# The source site rejects requests that do not look like they come from a
# browser.
DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0",
    "Accept-Encoding": "gzip, deflate, br",
    "Accept-Language": "en-US,en;q=0.9",
}


def _timeout(timeout: float | None) -> float | None:
    if timeout is None:
        timeout = settings.request_timeout
    # Non-positive values mean "wait indefinitely".
    return timeout if timeout > 0 else None


def fetch_html(url: str, *, timeout: float | None = None) -> str | None:
    """Fetch *url* and return the response body, or ``None`` on failure.

    Transport errors, 4xx/5xx responses and malformed URLs are logged and
    reported as ``None``; callers treat a missing body as a page to skip.

    Args:
        url: Absolute URL to GET.
        timeout: Seconds to wait for the response.  Defaults to
            ``settings.request_timeout``.
    """
    try:
        with httpx.Client(
            headers=DEFAULT_HEADERS,
            timeout=_timeout(timeout),
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.text
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("[FETCH] Error fetching %s: %s", url, exc)
        return None
