"""Logging configuration.

User-facing output is printed; logging carries diagnostics only, so the
default level is WARNING. Set TODO_LOG_LEVEL=DEBUG to see store reads,
writes and dispatch.
"""
import logging
import os
import sys
from typing import Optional

DEFAULT_LEVEL = logging.WARNING


def resolve_level(name: Optional[str]) -> int:
    """Map a level name to its number; unknown or empty names give WARNING."""
    if not name:
        return DEFAULT_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LEVEL


def setup_logging(level: Optional[int] = None) -> None:
    """Configure the root logger with a single stderr handler.

    Call this once, before the first log record is emitted.
    """
    if level is None:
        level = resolve_level(os.getenv("TODO_LOG_LEVEL"))

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    logging.captureWarnings(True)
