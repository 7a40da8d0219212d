"""Day 6: following a patrolling guard until it reaches the edge of the lab."""

import sys
from collections.abc import Sequence

from aoc2024.day01 import _leading_lines, _run_cli

Position = tuple[int, int]

# Up, right, down, left: turning right moves one step along this tuple.
_HEADINGS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_GUARD = "^"
_OPEN = frozenset(".^")


def find_guard(lines: Sequence[str]) -> Position:
    """Return the (row, col) of the first guard facing up."""
    for row, line in enumerate(lines):
        col = line.find(_GUARD)
        if col != -1:
            return row, col
    raise ValueError("the map has no guard")


def count_visited(lines: Sequence[str]) -> int:
    """Count the distinct cells the guard stands on before reaching an edge.

    The map is square. When the way ahead is blocked the guard turns right
    and takes one step in the new direction in the same move.
    """
    rows = [line.rstrip("\n") for line in lines]
    row, col = find_guard(rows)
    size = len(rows)
    obstacles = {
        (r, c)
        for r, line in enumerate(rows)
        for c, char in enumerate(line)
        if char not in _OPEN
    }
    heading = 0
    visited = {(row, col)}
    seen_states = {(row, col, heading)}
    while 0 < row < size - 1 and 0 < col < size - 1:
        dr, dc = _HEADINGS[heading]
        if (row + dr, col + dc) in obstacles:
            heading = (heading + 1) % len(_HEADINGS)
            dr, dc = _HEADINGS[heading]
            if (row + dr, col + dc) in obstacles:
                # The turning step walks over the obstacle and clears it.
                obstacles.discard((row + dr, col + dc))
                seen_states.clear()
        row += dr
        col += dc
        visited.add((row, col))
        state = (row, col, heading)
        if state in seen_states:
            raise ValueError("the guard walks in a loop and never leaves")
        seen_states.add(state)
    return len(visited)


def part1(text: str) -> int:
    return count_visited(_leading_lines(text))


def main(argv=None) -> int:
    return _run_cli(argv, "Count the cells a patrolling guard visits.", {1: part1})


if __name__ == "__main__":
    sys.exit(main())