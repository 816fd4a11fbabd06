"""Option values that control how numbers are abbreviated."""

from __future__ import annotations

import decimal
from dataclasses import dataclass, replace as _dc_replace
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple, Union


ABBREVIATIONS: Tuple[str, ...] = ("", "k", "M", "B", "T", "P", "E")
TIER_COUNT = len(ABBREVIATIONS)

DEFAULT_PRECISION = 1


class RoundingStrategy(Enum):
    """Rounding policies applied to the scaled magnitude."""

    HALF_UP = "half-up"
    HALF_DOWN = "half-down"
    HALF_EVEN = "half-even"
    HALF_AWAY_FROM_ZERO = "half-away-from-zero"
    TRUNCATE = "truncate"
    AWAY_FROM_ZERO = "away-from-zero"
    CEILING = "ceiling"
    FLOOR = "floor"

    @property
    def decimal_mode(self) -> str:
        """Return the matching :mod:`decimal` rounding constant."""

        return _DECIMAL_MODES[self]

    @classmethod
    def parse(cls, value: Union[str, "RoundingStrategy"]) -> "RoundingStrategy":
        """Resolve a member from its name, value or a common alias.

        Matching ignores case and treats ``_``, ``-`` and spaces alike, so
        ``"HALF_EVEN"``, ``"half-even"`` and ``"Half Even"`` all resolve.
        """

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Unknown rounding strategy: {value!r}")
        key = "-".join(value.strip().lower().replace("_", " ").replace("-", " ").split())
        try:
            return cls(_ALIASES.get(key, key))
        except ValueError:
            raise ValueError(f"Unknown rounding strategy: {value!r}") from None


# Scaled magnitudes are never negative, so HALF_UP and HALF_AWAY_FROM_ZERO coincide.
_DECIMAL_MODES: Dict[RoundingStrategy, str] = {
    RoundingStrategy.HALF_UP: decimal.ROUND_HALF_UP,
    RoundingStrategy.HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundingStrategy.HALF_EVEN: decimal.ROUND_HALF_EVEN,
    RoundingStrategy.HALF_AWAY_FROM_ZERO: decimal.ROUND_HALF_UP,
    RoundingStrategy.TRUNCATE: decimal.ROUND_DOWN,
    RoundingStrategy.AWAY_FROM_ZERO: decimal.ROUND_UP,
    RoundingStrategy.CEILING: decimal.ROUND_CEILING,
    RoundingStrategy.FLOOR: decimal.ROUND_FLOOR,
}

_ALIASES: Dict[str, str] = {
    "even": "half-even",
    "bankers": "half-even",
    "down": "truncate",
    "toward-zero": "truncate",
    "up": "away-from-zero",
}

DEFAULT_ROUNDING = RoundingStrategy.HALF_EVEN


@dataclass(frozen=True)
class AbbreviationOptions:
    """Optional overrides for :func:`abbrev_num.abbreviate`.

    Every field left as ``None`` falls back to the package default: one
    decimal place, :data:`ABBREVIATIONS` and half-even rounding.
    """

    precision: Optional[int] = None
    abbreviations: Optional[Sequence[str]] = None
    rounding_strategy: Optional[RoundingStrategy] = None

    def __post_init__(self) -> None:
        if self.precision is not None:
            if isinstance(self.precision, bool) or not isinstance(self.precision, int):
                raise ValueError(f"precision must be an int, got {self.precision!r}")
            if self.precision < 0:
                raise ValueError(f"precision must be non-negative, got {self.precision}")

        if self.abbreviations is not None:
            if isinstance(self.abbreviations, str):
                raise ValueError("abbreviations must be a sequence of labels, not a string")
            labels = tuple(self.abbreviations)
            if len(labels) != TIER_COUNT:
                raise ValueError(
                    f"abbreviations must contain exactly {TIER_COUNT} labels, got {len(labels)}"
                )
            if not all(isinstance(label, str) for label in labels):
                raise ValueError("abbreviations must only contain strings")
            object.__setattr__(self, "abbreviations", labels)

        if self.rounding_strategy is not None:
            object.__setattr__(
                self, "rounding_strategy", RoundingStrategy.parse(self.rounding_strategy)
            )

    @property
    def resolved_precision(self) -> int:
        return DEFAULT_PRECISION if self.precision is None else self.precision

    @property
    def resolved_abbreviations(self) -> Tuple[str, ...]:
        if self.abbreviations is None:
            return ABBREVIATIONS
        return tuple(self.abbreviations)

    @property
    def resolved_rounding(self) -> RoundingStrategy:
        if self.rounding_strategy is None:
            return DEFAULT_ROUNDING
        return self.rounding_strategy

    def replace(self, **changes: object) -> "AbbreviationOptions":
        """Return a copy with ``changes`` applied (validated again)."""

        return _dc_replace(self, **changes)


DEFAULT_OPTIONS = AbbreviationOptions()


__all__ = [
    "ABBREVIATIONS",
    "AbbreviationOptions",
    "DEFAULT_OPTIONS",
    "DEFAULT_PRECISION",
    "DEFAULT_ROUNDING",
    "RoundingStrategy",
    "TIER_COUNT",
]
