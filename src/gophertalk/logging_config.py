"""Logging configuration for the Gopher Talk service.

Usage:
    from gophertalk.logging_config import setup_logging

    # At application startup
    setup_logging("info")

    # In each module
    logger = logging.getLogger(__name__)
"""

from __future__ import annotations

import logging
import sys

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that are chatty below WARNING
NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure the root logger once for the whole application.

    Args:
        level: Logging level, as a number or a name such as "debug"
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=DEFAULT_LOG_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
