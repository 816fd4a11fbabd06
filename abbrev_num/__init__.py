"""Abbreviate integers into compact human-readable strings such as ``10.5k``."""

from __future__ import annotations

from .formatting import abbreviate, format_abbreviated
from .options import (
    ABBREVIATIONS,
    DEFAULT_OPTIONS,
    AbbreviationOptions,
    RoundingStrategy,
)
from .version import PACKAGE_VERSION, __version__

__all__ = [
    "ABBREVIATIONS",
    "AbbreviationOptions",
    "DEFAULT_OPTIONS",
    "PACKAGE_VERSION",
    "RoundingStrategy",
    "__version__",
    "abbreviate",
    "format_abbreviated",
]
