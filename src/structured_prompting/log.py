"""Logging setup shared by the scripts."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

# Chatty third-party loggers that would drown out our own INFO lines
_NOISY_LOGGERS = ("httpx", "httpcore", "openai")


def setup_logging(level: str = "WARNING") -> None:
    """
    Route log records through rich.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))
