"""Logging setup: stdlib loggers rendered through rich."""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "onionify"


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)


def setup_logging(level: str = "WARNING") -> None:
    """Send onionify logs to stderr so they don't mix with rendered output."""
    logger = logging.getLogger(ROOT_LOGGER)
    # errors are always emitted
    logger.setLevel(min(getattr(logging, level.upper(), logging.WARNING), logging.ERROR))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    logger.propagate = False
