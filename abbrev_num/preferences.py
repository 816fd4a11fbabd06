"""Option loading and persistence for abbreviation settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .logging_utils import get_logger
from .options import (
    DEFAULT_PRECISION,
    TIER_COUNT,
    AbbreviationOptions,
    RoundingStrategy,
)


_log = get_logger("preferences")

MAX_PRECISION = 12


def clamp_precision(value: object, default: int = DEFAULT_PRECISION) -> int:
    try:
        precision = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        precision = default
    return max(0, min(MAX_PRECISION, precision))


def _load_precision(raw: object) -> Optional[int]:
    if raw is None:
        return None
    if isinstance(raw, bool):
        _log.warning("Ignoring boolean precision %r", raw)
        return None
    try:
        requested = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        _log.warning("Ignoring invalid precision %r", raw)
        return None
    precision = clamp_precision(requested)
    if precision != requested:
        _log.warning("Precision %s out of range, using %s", requested, precision)
    return precision


def _load_abbreviations(raw: object) -> Optional[Tuple[str, ...]]:
    if raw is None:
        return None
    if isinstance(raw, str):
        labels = tuple(part.strip() for part in raw.split(","))
    elif isinstance(raw, (list, tuple)):
        labels = tuple(raw)
    else:
        _log.warning("Ignoring abbreviations of unsupported type %s", type(raw).__name__)
        return None
    if len(labels) != TIER_COUNT or not all(isinstance(label, str) for label in labels):
        _log.warning(
            "Ignoring abbreviations %r: expected %d string labels", raw, TIER_COUNT
        )
        return None
    return labels


def _load_rounding(raw: object) -> Optional[RoundingStrategy]:
    if raw is None:
        return None
    try:
        return RoundingStrategy.parse(raw)  # type: ignore[arg-type]
    except ValueError:
        _log.warning("Ignoring unknown rounding strategy %r", raw)
        return None


def load_options(values: Mapping[str, Any]) -> AbbreviationOptions:
    """Build options from a plain mapping, skipping invalid entries."""

    rounding_raw = values.get("rounding_strategy", values.get("rounding"))
    return AbbreviationOptions(
        precision=_load_precision(values.get("precision")),
        abbreviations=_load_abbreviations(values.get("abbreviations")),
        rounding_strategy=_load_rounding(rounding_raw),
    )


def load_options_file(path: Union[str, Path]) -> AbbreviationOptions:
    """Read options from a JSON file, falling back to defaults on failure."""

    config_path = Path(path)
    if not config_path.exists():
        _log.debug("No options file at %s; using defaults", config_path)
        return AbbreviationOptions()
    try:
        with config_path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        _log.warning("Failed to read options from %s: %s", config_path, exc)
        return AbbreviationOptions()
    if not isinstance(payload, dict):
        _log.warning("Options file %s must contain a JSON object", config_path)
        return AbbreviationOptions()
    return load_options(payload)


def dump_options(options: AbbreviationOptions) -> Dict[str, Any]:
    """Return the set fields of ``options`` as JSON-serialisable data."""

    payload: Dict[str, Any] = {}
    if options.precision is not None:
        payload["precision"] = options.precision
    if options.abbreviations is not None:
        payload["abbreviations"] = list(options.abbreviations)
    if options.rounding_strategy is not None:
        payload["rounding_strategy"] = options.rounding_strategy.value
    return payload


__all__ = [
    "MAX_PRECISION",
    "clamp_precision",
    "dump_options",
    "load_options",
    "load_options_file",
]
