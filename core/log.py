"""Logging setup: one ``factorial`` logger rendered by rich on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

APP_NAME = "factorial"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    # Re-running the CLI in one process (tests) must not stack handlers
    for handler in list(logger.handlers):
        if getattr(handler, "_factorial_handler", False):
            logger.removeHandler(handler)
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler._factorial_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(f"{APP_NAME}.{name}" if name else APP_NAME)
