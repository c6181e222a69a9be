"""Logging setup.

curses owns the screen while the browser runs, so log records go to a file
and never to stdout or stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Handler:
    """Attach a file handler to the ``tripane`` logger and return it.

    Unknown level names fall back to ``WARNING``.  When the log file cannot be
    opened, records are discarded instead.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    handler: logging.Handler
    if log_file:
        try:
            Path(log_file).expanduser().parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
        except OSError:
            handler = logging.NullHandler()
    else:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("tripane")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
        existing.close()
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    return handler


__all__ = ["LOG_FORMAT", "configure_logging"]
