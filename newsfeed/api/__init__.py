"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from newsfeed.api import app

    uvicorn newsfeed.api:app --reload
"""

from newsfeed.api.app import app

__all__ = ["app"]
