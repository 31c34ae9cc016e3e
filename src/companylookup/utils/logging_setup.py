"""Console logging for ``companylookup``."""

from __future__ import annotations

import logging
import sys
from typing import Final

LOGGER_NAME: Final = "companylookup"
_FORMAT: Final = "[%(asctime)s] %(levelname)s - %(message)s"
_DATE_FORMAT: Final = "%H:%M:%S"


def _has_console_handler(logger: logging.Logger) -> bool:
    return any(getattr(handler, "_companylookup", False) for handler in logger.handlers)


def setup_logger(level: int | None = None) -> logging.Logger:
    """Return the package logger, attaching one stdout handler on first use.

    ``level`` is only applied when given, so modules fetching the logger at
    import time do not undo a level chosen by the application. Until a level
    is set the logger starts at INFO.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False

    if not _has_console_handler(logger):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT, _DATE_FORMAT))
        handler._companylookup = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        if logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)

    if level is not None:
        logger.setLevel(level)
    return logger


def get_logger(component: str) -> logging.Logger:
    """Child logger ``companylookup.<component>`` sharing the console handler."""

    return setup_logger().getChild(component)
