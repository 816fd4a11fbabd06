"""Helper utilities for the package's logging hierarchy."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

PACKAGE_NAME = Path(__file__).resolve().parent.name

BASE_LOGGER = logging.getLogger(PACKAGE_NAME)
BASE_LOGGER.propagate = True
BASE_LOGGER.addHandler(logging.NullHandler())


def get_logger(suffix: str | None = None) -> logging.Logger:
    """Return the shared package logger or one of its children."""

    if suffix is None:
        return BASE_LOGGER
    logger = BASE_LOGGER.getChild(suffix)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    return logger


def set_log_level(level: int) -> None:
    """Update the base logger level (and implicitly its children)."""

    BASE_LOGGER.setLevel(level)


def coerce_log_level(value: object) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        candidate = value.strip()
        if not candidate:
            return None
        if candidate.isdigit():
            return int(candidate)
        level = logging.getLevelName(candidate.upper())
        return level if isinstance(level, int) else None
    return None


__all__ = ["BASE_LOGGER", "coerce_log_level", "get_logger", "set_log_level"]
