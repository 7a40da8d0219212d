"""Day 8: antinodes created by pairs of same-frequency antennas."""

import sys
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from itertools import combinations

from aoc2024.day01 import _leading_lines, _run_cli

Position = tuple[int, int]
Antennas = Mapping[str, Sequence[Position]]

_RESONANCE_STEPS = 100


def parse_antennas(text: str) -> tuple[dict[str, list[Position]], int]:
    """Map each frequency to its antenna positions; also return the map size.

    The map is square, so its size is its number of lines. Reading stops at
    the first empty line.
    """
    lines = _leading_lines(text)
    antennas: defaultdict[str, list[Position]] = defaultdict(list)
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char != ".":
                antennas[char].append((row, col))
    return dict(antennas), len(lines)


def _inside(points: Iterable[Position], size: int) -> set[Position]:
    return {(r, c) for r, c in points if 0 <= r < size and 0 <= c < size}


def _pairs(antennas: Antennas) -> Iterable[tuple[Position, Position]]:
    for positions in antennas.values():
        yield from combinations(positions, 2)


def antinodes(antennas: Antennas, size: int) -> set[Position]:
    """Points beyond each pair at the pair's own distance, inside the map."""
    found: set[Position] = set()
    for (r1, c1), (r2, c2) in _pairs(antennas):
        dr, dc = r1 - r2, c1 - c2
        found |= _inside([(r1 + dr, c1 + dc), (r2 - dr, c2 - dc)], size)
    return found


def resonant_antinodes(antennas: Antennas, size: int) -> set[Position]:
    """Antennas in pairs and points at every multiple of the pair's distance.

    Up to 100 steps are taken outward from each antenna of a pair.
    """
    found: set[Position] = set()
    steps = range(1, _RESONANCE_STEPS + 1)
    for (r1, c1), (r2, c2) in _pairs(antennas):
        dr, dc = r1 - r2, c1 - c2
        found |= _inside([(r1, c1), (r2, c2)], size)
        found |= _inside(((r1 + k * dr, c1 + k * dc) for k in steps), size)
        found |= _inside(((r2 - k * dr, c2 - k * dc) for k in steps), size)
    return found


def part1(text: str) -> int:
    return len(antinodes(*parse_antennas(text)))


def part2(text: str) -> int:
    return len(resonant_antinodes(*parse_antennas(text)))


def main(argv=None) -> int:
    return _run_cli(argv, "Count antenna antinodes.", {1: part1, 2: part2})


if __name__ == "__main__":
    sys.exit(main())