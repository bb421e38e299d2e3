"""Process-wide logging setup for the image server.

Modules log through ``logging.getLogger(__name__)``; the entry point calls
``configure_logging`` once so every ``imageserver.*`` logger shares one
handler and format.
"""
from __future__ import annotations

import logging

_LOGGER_NAME = "imageserver"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str = "INFO") -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)
    # Only attach once so repeated app factories do not duplicate output.
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = ["configure_logging"]
