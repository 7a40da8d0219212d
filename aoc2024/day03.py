"""Day 3: summing the products of well-formed mul(a,b) instructions."""

import re
import sys
from collections.abc import Iterator

from aoc2024.day01 import _leading_lines, _run_cli

_MUL = "mul("
_DO = "do()"
_DONT = "don't()"
_MUL_CALL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")


def parse_mul(text: str, start: int) -> tuple[int, int] | None:
    """Parse a mul(a,b) with 1-3 digit arguments at ``start``; None if malformed."""
    match = _MUL_CALL.match(text, start)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2))


def _product_at(text: str, start: int) -> int:
    args = parse_mul(text, start)
    return args[0] * args[1] if args else 0


def _occurrences(text: str, needle: str) -> Iterator[int]:
    position = text.find(needle)
    while position != -1:
        yield position
        position = text.find(needle, position + 1)


def sum_products(text: str) -> int:
    """Sum of the products of every well-formed mul instruction."""
    return sum(_product_at(text, position) for position in _occurrences(text, _MUL))


def _scan_line(line: str, disabled: bool) -> tuple[int, bool]:
    """Sum the enabled products on one line; return it and the state after it."""
    if disabled:
        enable = line.find(_DO)
        if enable == -1:
            return 0, True
        mul = line.find(_MUL, enable)
        dont = line.find(_DONT, enable)
    else:
        mul = line.find(_MUL)
        dont = line.find(_DONT)

    total = 0
    while mul != -1:
        if dont == -1 or mul < dont:
            total += _product_at(line, mul)
            mul = line.find(_MUL, mul + 1)
        else:
            enable = line.find(_DO, dont)
            if enable == -1:
                return total, True
            mul = line.find(_MUL, enable)
            dont = line.find(_DONT, mul) if mul != -1 else -1
    return total, False


def sum_enabled_products(text: str) -> int:
    """Like sum_products, but don't() disables and do() re-enables instructions.

    The enabled state carries over from one line to the next.
    """
    total = 0
    disabled = False
    for line in text.splitlines():
        line_total, disabled = _scan_line(line, disabled)
        total += line_total
    return total


def _program(text: str) -> str:
    return "\n".join(_leading_lines(text))


def part1(text: str) -> int:
    return sum_products(_program(text))


def part2(text: str) -> int:
    return sum_enabled_products(_program(text))


def main(argv=None) -> int:
    return _run_cli(argv, "Sum the results of corrupted mul instructions.", {1: part1, 2: part2})


if __name__ == "__main__":
    sys.exit(main())