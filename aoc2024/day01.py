"""Day 1: distances and similarity between two location-id lists."""

import argparse
import sys
from collections import Counter
from collections.abc import Callable, Mapping, Sequence
from itertools import takewhile
from pathlib import Path


def _leading_lines(text: str) -> list[str]:
    """The lines of ``text`` up to, not including, the first empty one."""
    return list(takewhile(bool, text.splitlines()))


def _run_cli(argv, description: str, solvers: Mapping[int, Callable[[str], int]]) -> int:
    """Read puzzle input from a file or stdin and print the requested answers."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input (default: stdin)")
    parser.add_argument("--part", type=int, choices=sorted(solvers), help="solve only this part")
    args = parser.parse_args(argv)
    if args.input == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.input).read_text(encoding="utf-8")
    for part in [args.part] if args.part else sorted(solvers):
        print(solvers[part](text))
    return 0


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split two whitespace-separated columns into a left and a right list.

    Reading stops at the first empty line.
    """
    left: list[int] = []
    right: list[int] = []
    for number, line in enumerate(_leading_lines(text), start=1):
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"line {number}: expected two numbers, got {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of differences between the lists once both are sorted."""
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right), strict=True))


def similarity(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of each left number times how often it appears in the right list."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def part1(text: str) -> int:
    return total_distance(*parse_lists(text))


def part2(text: str) -> int:
    return similarity(*parse_lists(text))


def main(argv=None) -> int:
    return _run_cli(argv, "Compare two location-id lists.", {1: part1, 2: part2})


if __name__ == "__main__":
    sys.exit(main())