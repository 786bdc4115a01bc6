from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the ``newsfeed`` logger with a single stderr handler.

    Safe to call more than once: existing handlers are replaced rather than
    stacked, so the CLI and the app lifespan can both call it.
    """
    logger = logging.getLogger("newsfeed")
    logger.setLevel(_level_from_string(level))
    logger.handlers = []
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_string(level))
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    return logger


def _level_from_string(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)
