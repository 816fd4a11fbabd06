"""Formatting helpers for compact numeric display."""

from __future__ import annotations

import decimal
import operator
from decimal import Decimal
from typing import Optional, SupportsIndex

from .options import DEFAULT_OPTIONS, AbbreviationOptions


# Enough significant digits for any tier-6 magnitude plus generous precision.
_CONTEXT_PRECISION = 40


def _tier_for(absolute: int) -> int:
    return (len(str(absolute)) - 1) // 3


def _strip_trailing_zeros(text: str) -> str:
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def abbreviate(
    number: SupportsIndex, options: Optional[AbbreviationOptions] = None
) -> Optional[str]:
    """Abbreviate ``number`` into a human-friendly string such as ``10.5k``.

    Returns ``None`` when the magnitude has no label in the active
    abbreviation table, or when the scaled value cannot be rounded in exact
    decimal arithmetic.

    >>> abbreviate(10_500)
    '10.5k'
    >>> abbreviate(1_566_450, AbbreviationOptions(precision=3))
    '1.566M'
    """

    if isinstance(number, bool):
        raise TypeError("abbreviate() expects an integer, not a bool")
    number = operator.index(number)
    if number == 0:
        return "0"

    opts = options or DEFAULT_OPTIONS
    absolute = abs(number)
    sign = "-" if number < 0 else ""
    tier = _tier_for(absolute)

    labels = opts.resolved_abbreviations
    if tier >= len(labels):
        return None
    label = labels[tier]

    if tier == 0:
        return f"{sign}{absolute}{label}"

    precision = opts.resolved_precision
    # A private context keeps the caller's thread-local decimal settings out.
    ctx = decimal.Context(
        prec=precision + _CONTEXT_PRECISION,
        traps=[decimal.InvalidOperation, decimal.Overflow, decimal.DivisionByZero],
    )
    try:
        scaled = Decimal(absolute).scaleb(-3 * tier, context=ctx)
        if not scaled.is_finite():
            return None
        rounded = scaled.quantize(
            Decimal(1).scaleb(-precision, context=ctx),
            rounding=opts.resolved_rounding.decimal_mode,
            context=ctx,
        )
    except decimal.DecimalException:
        return None
    if not rounded.is_finite():
        return None

    return f"{sign}{_strip_trailing_zeros(format(rounded, 'f'))}{label}"


def format_abbreviated(
    value: object,
    *,
    default: str = "--",
    options: Optional[AbbreviationOptions] = None,
) -> str:
    """Return an abbreviated display string, or ``default`` when there is none.

    Non-integral input is rounded to the nearest integer first.
    """

    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        number = value
    else:
        try:
            numeric = Decimal(str(value).strip().replace("_", ""))
        except decimal.InvalidOperation:
            return default
        if not numeric.is_finite():
            return default
        number = int(numeric.to_integral_value(rounding=decimal.ROUND_HALF_EVEN))

    result = abbreviate(number, options)
    return default if result is None else result


__all__ = ["abbreviate", "format_abbreviated"]
