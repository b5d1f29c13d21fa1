"""Logging setup for command-line runs.

Records go to stderr so the rendered tree on stdout stays byte-exact.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "dirtree"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _build_console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    return handler


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure (once) and return the package logger.

    Later calls only adjust the level of the existing handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if getattr(logger, "_is_configured", False):
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    logger.addHandler(_build_console_handler(level))
    logger.propagate = False
    logger._is_configured = True  # type: ignore[attr-defined]
    return logger
