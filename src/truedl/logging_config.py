from __future__ import annotations

"""Loguru setup shared by the CLI and embedding applications.

The package disables its own log records on import. Call
:func:`configure_logging` to route them to stderr (and optionally a file).
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FORMAT_CONSOLE = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)
LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} - "
    "{message}"
)


def configure_logging(level: str = "INFO", *, log_file: Optional[Path] = None) -> None:
    """Replace existing sinks with a stderr sink at *level* and enable ``truedl``."""

    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT_CONSOLE, colorize=None)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level="DEBUG",
            format=LOG_FORMAT_FILE,
            encoding="utf-8",
            backtrace=True,
        )
    logger.enable("truedl")


__all__ = ["logger", "configure_logging", "LOG_FORMAT_CONSOLE", "LOG_FORMAT_FILE"]
