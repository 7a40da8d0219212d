"""Day 20: counting shortcuts through the walls of a race track."""

import argparse
import sys
from collections.abc import Sequence, Set

Position = tuple[int, int]

_MIN_SAVING = 100
_LONG_CHEAT = 20
# North, south, west, east: the order in which the way ahead is looked for.
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def parse_track(text: str) -> tuple[frozenset[Position], Position, Position, int]:
    """Return the walls, the start, the end and the (square) size of the track.

    Reading stops at the first empty line.
    """
    walls: set[Position] = set()
    start = end = None
    size = 0
    for row, line in enumerate(text.splitlines()):
        if not line:
            break
        size += 1
        for col, char in enumerate(line):
            if char == "#":
                walls.add((row, col))
            elif char == "S":
                start = (row, col)
            elif char == "E":
                end = (row, col)
            elif char != ".":
                raise ValueError(f"unexpected track tile {char!r} at {(row, col)}")
    if start is None or end is None:
        raise ValueError("the track needs a start and an end")
    return frozenset(walls), start, end, size


def trace_path(walls: Set[Position], start: Position, end: Position) -> list[Position]:
    """Follow the single track from start to end and return every cell on it."""
    if not walls:
        raise ValueError("the track has no walls to follow")
    low_row = min(row for row, _ in walls)
    high_row = max(row for row, _ in walls)
    low_col = min(col for _, col in walls)
    high_col = max(col for _, col in walls)

    path = [start]
    visited = {start}
    previous = current = start
    while current != end:
        for dr, dc in _STEPS:
            step = (current[0] + dr, current[1] + dc)
            if step not in walls and step != previous:
                break
        else:
            raise ValueError(f"the track dead-ends at {current}")
        if not (low_row <= step[0] <= high_row and low_col <= step[1] <= high_col):
            raise ValueError("the track leaves the map")
        if step in visited:
            raise ValueError("the track loops without reaching the end")
        visited.add(step)
        path.append(step)
        previous, current = current, step
    return path


def count_cheats(path: Sequence[Position], max_cheat: int, min_saving: int) -> int:
    """Count cheats of at most ``max_cheat`` steps that save ``min_saving`` or more.

    A cheat jumps from one track cell to a later one; it saves the distance
    along the track minus the straight (taxicab) distance.
    """
    if max_cheat < 0:
        raise ValueError("cheat length cannot be negative")
    index = {position: i for i, position in enumerate(path)}
    offsets = [
        (dr, dc, abs(dr) + abs(dc))
        for dr in range(-max_cheat, max_cheat + 1)
        for dc in range(-(max_cheat - abs(dr)), max_cheat - abs(dr) + 1)
    ]
    total = 0
    for i, (row, col) in enumerate(path):
        for dr, dc, distance in offsets:
            j = index.get((row + dr, col + dc))
            if j is not None and j >= i and (j - i) - distance >= min_saving:
                total += 1
    return total


def _wall_cheats(
    walls: Set[Position], path: Sequence[Position], size: int, min_saving: int
) -> int:
    """Count walls whose removal joins track cells far enough apart."""
    distance = {position: i for i, position in enumerate(path)}
    total = 0
    for row, col in walls:
        if not (0 <= row < size and 0 <= col < size):
            continue
        around = [
            distance[(row + dr, col + dc)]
            for dr, dc in _STEPS
            if (row + dr, col + dc) in distance
        ]
        if around and max(around) - min(around) - 2 >= min_saving:
            total += 1
    return total


def part1(text: str) -> int:
    walls, start, end, size = parse_track(text)
    return _wall_cheats(walls, trace_path(walls, start, end), size, _MIN_SAVING)


def part2(text: str) -> int:
    walls, start, end, _ = parse_track(text)
    return count_cheats(trace_path(walls, start, end), _LONG_CHEAT, _MIN_SAVING)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Count race-track cheats that save time.")
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