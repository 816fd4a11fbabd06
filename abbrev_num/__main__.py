"""Command line entry point: abbreviate numbers given as arguments or on stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, TextIO

from .formatting import abbreviate
from .logging_utils import coerce_log_level, get_logger, set_log_level
from .options import AbbreviationOptions, RoundingStrategy
from .preferences import clamp_precision, load_options_file
from .version import __version__, display_version


_log = get_logger("cli")

UNREPRESENTABLE = "-"


def _parse_number(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None


def _parse_log_level(text: str) -> int:
    level = coerce_log_level(text)
    if level is None:
        raise argparse.ArgumentTypeError(f"unknown log level: {text!r}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abbrev-num",
        description="Abbreviate integers into compact strings such as 10.5k.",
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        type=_parse_number,
        help="Integers to abbreviate. Reads whitespace-separated integers from stdin when omitted.",
    )
    parser.add_argument("-p", "--precision", type=int, help="Decimal places to keep (default 1).")
    parser.add_argument(
        "-r",
        "--rounding",
        choices=[strategy.value for strategy in RoundingStrategy],
        help="Rounding strategy (default half-even).",
    )
    parser.add_argument(
        "-u",
        "--units",
        help="Comma separated list of the seven unit labels, e.g. ',k,M,B,T,P,E'.",
    )
    parser.add_argument("--config", help="JSON file with precision/abbreviations/rounding_strategy.")
    parser.add_argument(
        "--log-level",
        type=_parse_log_level,
        default=logging.WARNING,
        help="Logging level name or number (default WARNING).",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {display_version(__version__)}"
    )
    return parser


def _resolve_options(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> AbbreviationOptions:
    if args.config and not Path(args.config).is_file():
        parser.error(f"config file not found: {args.config}")
    options = load_options_file(args.config) if args.config else AbbreviationOptions()
    overrides = {}
    if args.precision is not None:
        precision = clamp_precision(args.precision)
        if precision != args.precision:
            _log.warning("Precision %s out of range, using %s", args.precision, precision)
        overrides["precision"] = precision
    if args.rounding is not None:
        overrides["rounding_strategy"] = args.rounding
    if args.units is not None:
        overrides["abbreviations"] = args.units.split(",")
    try:
        return options.replace(**overrides)
    except ValueError as exc:
        parser.error(str(exc))


def _read_numbers(stream: TextIO) -> Iterable[Optional[int]]:
    """Yield integers from ``stream``; ``None`` marks a token that is not one."""

    for line in stream:
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                _log.warning("Skipping non-integer input %r", token)
                yield None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    set_log_level(args.log_level)

    options = _resolve_options(parser, args)
    _log.debug("Using options %s", options)

    numbers: Iterable[Optional[int]] = args.numbers if args.numbers else _read_numbers(sys.stdin)
    failures = 0
    for number in numbers:
        result = None if number is None else abbreviate(number, options)
        if result is None:
            failures += 1
            if number is not None:
                _log.info("Cannot abbreviate %d with the active labels", number)
            result = UNREPRESENTABLE
        print(result)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
