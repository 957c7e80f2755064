"""Loguru logging setup."""

import os
import sys
from loguru import logger

DEFAULT_LEVEL = "WARNING"


def setup_logging(level: str | None = None) -> None:
    """Route loguru to stderr at the given level.

    Without an explicit level, ``LOG_LEVEL`` is used, then WARNING, so a
    normal run leaves stderr empty.
    """
    if level is None:
        level = os.environ.get("LOG_LEVEL", DEFAULT_LEVEL).upper()

    logger.remove()  # drop the default handler
    logger.add(
        sys.stderr,
        format="<level>{time:YYYY-MM-DD HH:mm:ss} | {name}:{function}:{line} | {message}</level>",
        level=level,
        colorize=True,
        backtrace=False,
        diagnose=False,
    )
