"""Day 19: arranging towel patterns into requested designs."""

import argparse
import re
import sys
from collections.abc import Sequence

_SEPARATORS = re.compile(r"[,\s]+")


def parse_towels(text: str) -> tuple[list[str], list[str]]:
    """Return the towel patterns from the first line and the designs after it.

    Blank lines among the designs are skipped.
    """
    lines = text.splitlines()
    if not lines:
        raise ValueError("no towel patterns given")
    towels = [token for token in _SEPARATORS.split(lines[0]) if token]
    if not towels:
        raise ValueError("no towel patterns given")
    designs = [line.strip() for line in lines[1:] if line.strip()]
    return towels, designs


def count_arrangements(design: str, towels: Sequence[str]) -> int:
    """Number of ways to lay towels end to end to spell out ``design``.

    A towel listed twice counts as two different choices. An empty design
    has no arrangements.
    """
    if not design:
        return 0
    patterns = [towel for towel in towels if towel]
    ways = [1] + [0] * len(design)
    for end in range(1, len(design) + 1):
        ways[end] = sum(
            ways[end - len(towel)]
            for towel in patterns
            if len(towel) <= end and design.startswith(towel, end - len(towel))
        )
    return ways[-1]


def part1(text: str) -> int:
    towels, designs = parse_towels(text)
    return sum(count_arrangements(design, towels) > 0 for design in designs)


def part2(text: str) -> int:
    towels, designs = parse_towels(text)
    return sum(count_arrangements(design, towels) for design in designs)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Count towel arrangements for designs.")
    parser.add_argument("input", nargs="?", default="-", help="puzzle input (default: stdin)")
    parser.add_argument("--part", type=int, choices=(1, 2), help="solve only this part")
    args = parser.parse_args(argv)
    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    solvers = {1: part1, 2: part2}
    for part in [args.part] if args.part else sorted(solvers):
        print(solvers[part](text))
    return 0


if __name__ == "__main__":
    sys.exit(main())