"""similarity command-line interface."""

import argparse
import json
import logging
import sys
from typing import Any, Callable, Optional

from .config import LOG_LEVELS, SimilarityConfig
from .formats import parse_floats, parse_int, render_report
from .log import get_logger
from .measures import (
    HammingDistance, LevenshteinDistance,
    MaximumHammingDistance, PopulationStandardDeviation,
)
from .metrics import absolute_difference, percent_change

_LOGGER = logging.getLogger(__name__)

Rows = list[tuple[str, Any]]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="similarity",
        description="Compute a similarity metric between inputs",
    )
    parser.add_argument(
        "--bits",
        type=int,
        default=32,
        help="Integer width for overflow checks (default: 32)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    p = subparsers.add_parser("absolute-difference", help="|b - a| of two integers")
    p.add_argument("value1")
    p.add_argument("value2")

    p = subparsers.add_parser("percent-change", help="Percent change from a to b")
    p.add_argument("value1")
    p.add_argument("value2")

    p = subparsers.add_parser("hamming", help="Hamming distance of two words")
    p.add_argument("word1")
    p.add_argument("word2")

    p = subparsers.add_parser(
        "hamming-collection",
        help="Maximum pairwise Hamming distance of a collection of words",
    )
    p.add_argument("words", nargs="*")

    p = subparsers.add_parser("levenshtein", help="Levenshtein distance of two words")
    p.add_argument("word1")
    p.add_argument("word2")

    p = subparsers.add_parser("std-dev", help="Population standard deviation of numbers")
    p.add_argument("numbers", nargs="*")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run one metric and print its report.

    Exit codes: 0 on success, 1 when the result is undefined, 2 for
    malformed arguments (argparse convention).
    """
    parser = build_parser()
    args = parser.parse_args(_mark_negative_numbers(sys.argv[1:] if argv is None else argv))

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = SimilarityConfig(int_bits=args.bits, log_level=args.log_level)
    except ValueError as exc:
        parser.error(str(exc))
    get_logger(level=config.level)
    _LOGGER.debug("running %s with %s", args.command, config.as_dict())

    handler = _COMMANDS[args.command]
    try:
        rows, result = handler(args, config)
    except ValueError as exc:
        parser.error(str(exc))

    print(render_report(rows))
    if result is None:
        _LOGGER.warning("%s is undefined for the given inputs", args.command)
        return 1
    return 0


def _mark_negative_numbers(argv: list[str]) -> list[str]:
    """
    Insert "--" after the sub-command when a later argument is a number
    with a leading minus that argparse would read as an option ("-1e3").
    """
    if "--" in argv:
        return list(argv)
    command_index = next((i for i, arg in enumerate(argv) if arg in _COMMANDS), None)
    if command_index is None:
        return list(argv)
    rest = argv[command_index + 1:]
    if not any(_is_negative_number(arg) for arg in rest):
        return list(argv)
    return argv[:command_index + 1] + ["--"] + rest


def _is_negative_number(arg: str) -> bool:
    if not arg.startswith("-"):
        return False
    try:
        float(arg)
    except ValueError:
        return False
    return True


# ═══════════════════════════════════════════════════════════════════
#  COMMANDS
# ═══════════════════════════════════════════════════════════════════

def _absolute_difference(args: argparse.Namespace, config: SimilarityConfig) -> tuple[Rows, Any]:
    domain = config.domain
    a, b = parse_int(args.value1, domain), parse_int(args.value2, domain)
    result = absolute_difference(a, b, domain)
    return [("value 1", a), ("value 2", b), ("absolute difference", result)], result


def _percent_change(args: argparse.Namespace, config: SimilarityConfig) -> tuple[Rows, Any]:
    domain = config.domain
    a, b = parse_int(args.value1, domain), parse_int(args.value2, domain)
    result = percent_change(a, b, domain)
    return [("value 1", a), ("value 2", b), ("percent change", result)], result


def _hamming(args: argparse.Namespace, config: SimilarityConfig) -> tuple[Rows, Any]:
    result = HammingDistance.similarity((args.word1, args.word2))
    if len(args.word1) != len(args.word2):
        _LOGGER.info("words differ in length; compared the first %d units",
                     min(len(args.word1), len(args.word2)))
    return [("word 1", args.word1), ("word 2", args.word2), ("hamming distance", result)], result


def _hamming_collection(args: argparse.Namespace, config: SimilarityConfig) -> tuple[Rows, Any]:
    result = MaximumHammingDistance.similarity(args.words)
    return [("words", json.dumps(args.words, ensure_ascii=False)), ("maximum hamming distance", result)], result


def _levenshtein(args: argparse.Namespace, config: SimilarityConfig) -> tuple[Rows, Any]:
    result = LevenshteinDistance.similarity((args.word1, args.word2))
    return [("word 1", args.word1), ("word 2", args.word2), ("levenshtein distance", result)], result


def _std_dev(args: argparse.Namespace, config: SimilarityConfig) -> tuple[Rows, Any]:
    numbers = parse_floats(args.numbers)
    result = PopulationStandardDeviation.similarity(numbers)
    return [("numbers", numbers), ("population standard deviation", result)], result


_COMMANDS: dict[str, Callable[[argparse.Namespace, SimilarityConfig], tuple[Rows, Any]]] = {
    "absolute-difference": _absolute_difference,
    "percent-change": _percent_change,
    "hamming": _hamming,
    "hamming-collection": _hamming_collection,
    "levenshtein": _levenshtein,
    "std-dev": _std_dev,
}


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
