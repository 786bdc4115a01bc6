"""Centralised settings for the newsfeed service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Source site
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get("NEWS_BASE_URL", "https://akharinkhabar.ir")
    )
    news_limit: int = field(
        default_factory=lambda: int(os.environ.get("NEWS_LIMIT", "50"))
    )
    selectors_file: Path | None = field(
        default_factory=lambda: (
            Path(os.environ["NEWS_SELECTORS_FILE"])
            if os.environ.get("NEWS_SELECTORS_FILE")
            else None
        )
    )

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    max_workers: int = field(
        default_factory=lambda: int(os.environ.get("NEWS_MAX_WORKERS", "8"))
    )

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------
    cache_file: Path = field(
        default_factory=lambda: Path(os.environ.get("NEWS_CACHE_FILE", "news_cache.json"))
    )
    cache_expire_hours: float = field(
        default_factory=lambda: float(os.environ.get("NEWS_CACHE_EXPIRE_HOURS", "2"))
    )

    # ------------------------------------------------------------------
    # HTTP server / logging
    # ------------------------------------------------------------------
    host: str = field(default_factory=lambda: os.environ.get("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.environ.get("PORT", "3000")))
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))


# Module-level singleton; import this everywhere:
#   from newsfeed.config import settings
settings = Settings()
