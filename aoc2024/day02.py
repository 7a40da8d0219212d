"""Day 2: checking reactor reports for safely changing levels."""

import sys
from collections.abc import Sequence
from itertools import pairwise

from aoc2024.day01 import _leading_lines, _run_cli

_RISING = range(1, 4)
_FALLING = range(-3, 0)


def parse_reports(text: str) -> list[list[int]]:
    """One list of levels per line; reading stops at the first empty line."""
    return [[int(field) for field in line.split()] for line in _leading_lines(text)]


def _checked(levels: Sequence[int]) -> list[int]:
    levels = list(levels)
    if len(levels) < 2:
        raise ValueError("a report needs at least two levels")
    return levels


def _first_violation(levels: list[int]) -> int | None:
    """Index of the level that breaks the rules, or None if the report is safe.

    The first pair fixes the direction; every step must move 1 to 3 that way.
    """
    if len(levels) < 2:
        return None
    allowed = _RISING if levels[1] > levels[0] else _FALLING
    for index, (a, b) in enumerate(pairwise(levels), start=1):
        if b - a not in allowed:
            return index
    return None


def is_safe(levels: Sequence[int]) -> bool:
    """True when the levels all rise or all fall by 1 to 3 each step."""
    return _first_violation(_checked(levels)) is None


def is_safe_with_dampener(levels: Sequence[int]) -> bool:
    """True when the report is safe, or becomes safe without one level.

    Only the offending level, the one before it and the first two levels
    are tried for removal.
    """
    levels = _checked(levels)
    bad = _first_violation(levels)
    if bad is None:
        return True
    return any(
        _first_violation(levels[:skip] + levels[skip + 1:]) is None
        for skip in (bad, bad - 1, 0, 1)
    )


def part1(text: str) -> int:
    return sum(is_safe(report) for report in parse_reports(text))


def part2(text: str) -> int:
    return sum(is_safe_with_dampener(report) for report in parse_reports(text))


def main(argv=None) -> int:
    return _run_cli(argv, "Count safe reactor reports.", {1: part1, 2: part2})


if __name__ == "__main__":
    sys.exit(main())