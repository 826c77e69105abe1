"""Root logger configuration for the command line."""

from __future__ import annotations

import logging
import sys
from typing import Final, TextIO

LOG_FORMAT: Final = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"

_LEVELS: Final = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def resolve_level(level: str | int) -> int:
    """Map a level name (any case) or numeric level to a logging level."""
    if isinstance(level, int):
        return level
    try:
        return _LEVELS[level.lower()]
    except KeyError as exc:
        msg = f"Unknown log level '{level}'. Valid levels: {', '.join(_LEVELS)}"
        raise ValueError(msg) from exc


def setup_logging(level: str | int = "warning", stream: TextIO | None = None) -> None:
    """Install a single stream handler on the root logger.

    Replaces any handlers configured earlier, so calling it twice does not
    duplicate output. Logs go to stderr unless ``stream`` is given.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(
        level=resolve_level(level),
        handlers=[handler],
        force=True,
    )
