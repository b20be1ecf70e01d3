"""Logging setup for the askcli package."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "askcli"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attach a stderr RichHandler to the package logger.

    The root logger is left alone so embedding applications and test
    harnesses keep their own handlers. Calling this twice is harmless.

    Args:
        level: Logging level for the package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(getattr(h, "_askcli", False) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler._askcli = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
