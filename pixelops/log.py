"""Logging helpers for pixelops."""

from __future__ import annotations

import logging
from typing import Optional

_ROOT_NAME = "pixelops"
_LOGGER: Optional[logging.Logger] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it when *name* is given.

    The package logger is configured once with a console handler that prints
    ``[LEVEL] message`` lines.
    """

    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger(_ROOT_NAME)
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    if not name or name == _ROOT_NAME:
        return _LOGGER
    if name.startswith(_ROOT_NAME + "."):
        name = name[len(_ROOT_NAME) + 1:]
    return _LOGGER.getChild(name)


def log(message: str) -> None:
    get_logger().info(message)


def warn(message: str) -> None:
    get_logger().warning(message)
