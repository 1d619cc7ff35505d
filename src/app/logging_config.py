# src/app/logging_config.py
"""
Root logging setup for the grid-astar command-line tools.

cli.find_path calls configure_logging() once, sending records to stderr
so stdout stays a clean JSON document:

    from app.logging_config import configure_logging
    configure_logging("DEBUG", stream=sys.stderr)

At INFO you see failed searches from nav.pathfinder; at DEBUG also the
per-search summaries and, when a SearchTracer has log_records=True, every
expansion and relaxation on the nav.search logger.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def is_level_name(name: str) -> bool:
    """True if logging knows name as a level (case-sensitive, e.g. "INFO")."""
    return isinstance(logging.getLevelName(name), int)


def configure_logging(
    level: int | str = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Attach one StreamHandler to the root logger.

    Does nothing when the root logger already has handlers (pytest's
    log capture, or an embedding application).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
