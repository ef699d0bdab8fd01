"""Logging helpers for promptstyle.

The package logs under the ``promptstyle`` logger and stays silent unless the
embedding application configures logging or calls :func:`setup_logger`.
"""

from __future__ import annotations

import logging
from typing import IO, Optional

__all__ = ["PACKAGE_LOGGER", "setup_logger", "get_logger"]

PACKAGE_LOGGER = "promptstyle"
CONSOLE_FORMAT = "[%(levelname).1s] %(name)s: %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logger(verbose: bool = False, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Send package logs to the console.

    Args:
        verbose: ``True`` shows DEBUG messages (shared theme construction,
            theme registration, theme files); ``False`` keeps WARNING+.
        stream: Target stream, ``sys.stderr`` when omitted.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING

    # Reconfigure safely if setup_logger is called more than once.
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            continue
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level)

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name without changing its configuration."""
    return logging.getLogger(name)
