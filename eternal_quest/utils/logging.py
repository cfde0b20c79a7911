"""Logging configuration shared by the console and HTTP drivers.

Quest logs go to stderr so they never interleave with the console menu on
stdout. Only the ``eternal_quest`` logger tree follows the requested level;
third-party loggers stay at WARNING, so ``--log-level DEBUG`` shows ledger
activity without asyncio or multipart chatter.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "eternal_quest"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name in any case to its number; unknown names mean INFO."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> logging.Logger:
    """Send quest logs at *level* to *stream* (stderr by default).

    Calling it again replaces the previous handler instead of stacking a
    second one. Returns the package logger.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(resolve_level(level))
    return package
