"""News endpoints.

Routes
------
GET /             Liveness text
GET /news         Cached or freshly scraped news list
GET /clear-cache  Drop the cached news list
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class MessageResponse(BaseModel):
    message: str


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/", response_class=PlainTextResponse)
def index() -> str:
    return "News scraper is running."


@router.get("/news")
def news(request: Request) -> Any:
    """Return ``{"news": [...]}``, or ``{"error": ...}`` when nothing was found.

    Runs the full scrape on a cache miss, so the first call after expiry can
    take a while.
    """
    scraper = request.app.state.scraper
    try:
        outcome = scraper.scrape()
    except Exception:
        logger.exception("[API] /news failed")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
    return outcome.to_dict()


@router.get("/clear-cache", response_model=MessageResponse)
def clear_cache(request: Request) -> Any:
    try:
        request.app.state.scraper.clear_cache()
    except Exception:
        logger.exception("[API] /clear-cache failed")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
    return {"message": "Cache cleared."}
