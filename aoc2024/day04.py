"""Day 4: finding XMAS and crossed MAS patterns in a word search."""

import sys
from collections.abc import Iterator, Sequence
from itertools import product

from aoc2024.day01 import _leading_lines, _run_cli

_WORD = "XMAS"
_CROSS = frozenset("MS")


def _grid(lines: Sequence[str]) -> list[str]:
    rows = [line.rstrip("\n") for line in lines]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("word search rows must all have the same length")
    return rows


def _occurrences(line: str, word: str) -> int:
    count = 0
    position = line.find(word)
    while position != -1:
        count += 1
        position = line.find(word, position + 1)
    return count


def _lines_through(rows: list[str]) -> Iterator[str]:
    """Every row, column and diagonal of the grid as a string."""
    height = len(rows)
    width = len(rows[0]) if rows else 0
    yield from rows
    yield from ("".join(column) for column in zip(*rows))
    for offset in range(-(height - 1), width):
        yield "".join(
            rows[r][r + offset] for r in range(height) if 0 <= r + offset < width
        )
    for diagonal in range(height + width - 1):
        yield "".join(
            rows[r][diagonal - r] for r in range(height) if 0 <= diagonal - r < width
        )


def count_xmas(lines: Sequence[str]) -> int:
    """Count XMAS read in any of the eight directions."""
    backwards = _WORD[::-1]
    return sum(
        _occurrences(line, _WORD) + _occurrences(line, backwards)
        for line in _lines_through(_grid(lines))
    )


def count_x_mas(lines: Sequence[str]) -> int:
    """Count A cells where both diagonals through it read MAS either way."""
    rows = _grid(lines)
    height = len(rows)
    width = len(rows[0]) if rows else 0
    count = 0
    for r, c in product(range(1, height - 1), range(1, width - 1)):
        if rows[r][c] != "A":
            continue
        falling = {rows[r - 1][c - 1], rows[r + 1][c + 1]}
        rising = {rows[r + 1][c - 1], rows[r - 1][c + 1]}
        if falling == _CROSS and rising == _CROSS:
            count += 1
    return count


def part1(text: str) -> int:
    return count_xmas(_leading_lines(text))


def part2(text: str) -> int:
    return count_x_mas(_leading_lines(text))


def main(argv=None) -> int:
    return _run_cli(argv, "Search a grid of letters for XMAS.", {1: part1, 2: part2})


if __name__ == "__main__":
    sys.exit(main())