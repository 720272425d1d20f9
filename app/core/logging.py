"""Console logging setup for the application loggers."""
from __future__ import annotations

import logging
import sys

_CONSOLE_FMT = "%(asctime)s | %(name)-24s | %(levelname)-7s | %(message)s"
_ROOT_LOGGER = "app"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the ``app`` logger and set its level.

    Safe to call more than once; the handler is only installed the first time.
    """

    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_CONSOLE_FMT))
        logger.addHandler(handler)

    return logger
