import decimal
from decimal import Decimal

import pytest

import abbrev_num.formatting as formatting
from abbrev_num.formatting import abbreviate, format_abbreviated
from abbrev_num.options import AbbreviationOptions, RoundingStrategy


CUSTOM_UNITS = ("_c0", "_c1", "_c2", "_c3", "_c4", "_c5", "_c6")


def test_abbreviate_defaults() -> None:
    assert abbreviate(0) == "0"
    assert abbreviate(-0) == "0"
    assert abbreviate(1) == "1"
    assert abbreviate(10) == "10"
    assert abbreviate(150) == "150"
    assert abbreviate(999) == "999"
    assert abbreviate(1_000) == "1k"
    assert abbreviate(1_200) == "1.2k"
    assert abbreviate(10_000) == "10k"
    assert abbreviate(10_500) == "10.5k"
    assert abbreviate(150_000) == "150k"
    assert abbreviate(1_000_000) == "1M"
    assert abbreviate(4_500_000) == "4.5M"
    assert abbreviate(1_000_000_000) == "1B"
    assert abbreviate(1_000_000_000_000) == "1T"
    assert abbreviate(1_000_000_000_000_000) == "1P"
    assert abbreviate(1_000_000_000_000_000_000) == "1E"


def test_abbreviate_preserves_sign() -> None:
    assert abbreviate(-10) == "-10"
    assert abbreviate(-999) == "-999"
    assert abbreviate(-1_500) == "-1.5k"
    assert abbreviate(-4_500_000) == "-4.5M"


def test_abbreviate_zero_ignores_options() -> None:
    options = AbbreviationOptions(precision=4, abbreviations=CUSTOM_UNITS)
    assert abbreviate(0, options) == "0"


def test_abbreviate_precision() -> None:
    assert abbreviate(1_566_450, AbbreviationOptions(precision=3)) == "1.566M"
    assert abbreviate(1_566_450, AbbreviationOptions(precision=0)) == "2M"
    assert abbreviate(4_321_000, AbbreviationOptions(precision=2)) == "4.32M"


def test_abbreviate_strips_trailing_zeros() -> None:
    assert abbreviate(1_500, AbbreviationOptions(precision=5)) == "1.5k"
    assert abbreviate(2_000_000, AbbreviationOptions(precision=3)) == "2M"
    assert abbreviate(150_000, AbbreviationOptions(precision=2)) == "150k"


def test_abbreviate_custom_units() -> None:
    options = AbbreviationOptions(abbreviations=CUSTOM_UNITS)

    assert abbreviate(10, options) == "10_c0"
    assert abbreviate(1_000, options) == "1_c1"
    assert abbreviate(1_000_000, options) == "1_c2"
    assert abbreviate(1_000_000_000, options) == "1_c3"
    assert abbreviate(1_000_000_000_000, options) == "1_c4"
    assert abbreviate(1_000_000_000_000_000, options) == "1_c5"
    assert abbreviate(1_000_000_000_000_000_000, options) == "1_c6"


def test_abbreviate_beyond_table_returns_none() -> None:
    assert abbreviate(10**21) is None
    assert abbreviate(-(10**21)) is None
    assert abbreviate(10**21, AbbreviationOptions(abbreviations=CUSTOM_UNITS)) is None


def test_abbreviate_largest_tier_does_not_retier() -> None:
    assert abbreviate(10**21 - 1) == "1000E"
    assert abbreviate(999_950) == "1000k"


def test_abbreviate_midpoints_are_exact() -> None:
    # 1.15 is not representable as a binary float, the tie must still be seen.
    assert abbreviate(1_150) == "1.2k"
    assert abbreviate(1_250) == "1.2k"
    assert abbreviate(1_350) == "1.4k"


def _with(strategy: RoundingStrategy) -> AbbreviationOptions:
    return AbbreviationOptions(rounding_strategy=strategy)


def test_abbreviate_half_rounding_strategies() -> None:
    assert abbreviate(1_250, _with(RoundingStrategy.HALF_UP)) == "1.3k"
    assert abbreviate(1_250, _with(RoundingStrategy.HALF_DOWN)) == "1.2k"
    assert abbreviate(1_251, _with(RoundingStrategy.HALF_DOWN)) == "1.3k"
    assert abbreviate(1_150, _with(RoundingStrategy.HALF_DOWN)) == "1.1k"
    assert abbreviate(1_250, _with(RoundingStrategy.HALF_EVEN)) == "1.2k"
    assert abbreviate(1_250, _with(RoundingStrategy.HALF_AWAY_FROM_ZERO)) == "1.3k"
    assert abbreviate(-1_250, _with(RoundingStrategy.HALF_AWAY_FROM_ZERO)) == "-1.3k"


def test_abbreviate_directed_rounding_strategies() -> None:
    assert abbreviate(1_999, _with(RoundingStrategy.TRUNCATE)) == "1.9k"
    assert abbreviate(1_001, _with(RoundingStrategy.AWAY_FROM_ZERO)) == "1.1k"
    assert abbreviate(1_001, _with(RoundingStrategy.CEILING)) == "1.1k"
    assert abbreviate(1_999, _with(RoundingStrategy.FLOOR)) == "1.9k"
    # Directed modes act on the magnitude; the sign is attached afterwards.
    assert abbreviate(-1_001, _with(RoundingStrategy.CEILING)) == "-1.1k"
    assert abbreviate(-1_999, _with(RoundingStrategy.FLOOR)) == "-1.9k"


def test_abbreviate_ignores_caller_decimal_context() -> None:
    with decimal.localcontext() as ctx:
        ctx.prec = 2
        ctx.rounding = decimal.ROUND_UP
        assert abbreviate(1_566_450, AbbreviationOptions(precision=3)) == "1.566M"
        assert abbreviate(1_250) == "1.2k"


def test_abbreviate_is_deterministic() -> None:
    options = AbbreviationOptions(precision=2, rounding_strategy=RoundingStrategy.HALF_UP)
    results = {abbreviate(987_654_321, options) for _ in range(5)}
    assert results == {"987.65M"}


def test_abbreviate_rejects_non_integers() -> None:
    with pytest.raises(TypeError):
        abbreviate(1500.0)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        abbreviate("1500")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        abbreviate(True)  # type: ignore[arg-type]


class _UnscalableDecimal(Decimal):
    def scaleb(self, other, context=None):  # type: ignore[override]
        raise decimal.InvalidOperation("cannot scale")


class _InfiniteDecimal(Decimal):
    def scaleb(self, other, context=None):  # type: ignore[override]
        return Decimal("Infinity")


def test_abbreviate_returns_none_when_decimal_scaling_fails(monkeypatch) -> None:
    monkeypatch.setattr(formatting, "Decimal", _UnscalableDecimal)

    assert abbreviate(1500) is None
    assert abbreviate(999) == "999"
    assert format_abbreviated(1500) == "--"


def test_abbreviate_returns_none_for_non_finite_scaling(monkeypatch) -> None:
    monkeypatch.setattr(formatting, "Decimal", _InfiniteDecimal)

    assert abbreviate(-1500) is None


def test_format_abbreviated_basic() -> None:
    assert format_abbreviated(None) == "--"
    assert format_abbreviated(0) == "0"
    assert format_abbreviated(1500) == "1.5k"
    assert format_abbreviated(1500.4) == "1.5k"
    assert format_abbreviated(2.5) == "2"
    assert format_abbreviated(Decimal("999.5")) == "1k"
    assert format_abbreviated("12_345") == "12.3k"
    assert format_abbreviated(-4_300_000) == "-4.3M"


def test_format_abbreviated_falls_back_to_default() -> None:
    assert format_abbreviated(True) == "--"
    assert format_abbreviated("abc") == "--"
    assert format_abbreviated(float("nan")) == "--"
    assert format_abbreviated(float("inf"), default="n/a") == "n/a"
    assert format_abbreviated(10**21, default="") == ""


def test_format_abbreviated_passes_options() -> None:
    options = AbbreviationOptions(precision=2, abbreviations=CUSTOM_UNITS)
    assert format_abbreviated(1_234_567, options=options) == "1.23_c2"
