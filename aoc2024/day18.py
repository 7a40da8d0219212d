"""Day 18: escaping a memory grid while bytes fall into it."""

import argparse
import sys
from bisect import bisect_left
from collections import deque
from collections.abc import Iterator, Sequence, Set

SIZE = 71
READ_AMOUNT = 1024

Coord = tuple[int, int]

_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def _raw_coords(text: str) -> Iterator[Coord]:
    for line in text.splitlines():
        if not line:
            break
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"malformed coordinate {line!r}")
        yield int(x), int(y)


def _inside(coord: Coord, size: int) -> bool:
    return 0 <= coord[0] < size and 0 <= coord[1] < size


def parse_bytes(text: str, size: int = SIZE) -> list[Coord]:
    """The ``x,y`` byte positions in order, dropping those outside the grid."""
    return [coord for coord in _raw_coords(text) if _inside(coord, size)]


def shortest_path(blocked: Set[Coord], size: int = SIZE) -> int | None:
    """Fewest steps from the top-left to the bottom-right corner, or None if cut off."""
    if size < 1:
        raise ValueError("grid size must be positive")
    goal = (size - 1, size - 1)
    distance = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        here = queue.popleft()
        if here == goal:
            return distance[here]
        x, y = here
        for dx, dy in _STEPS:
            step = (x + dx, y + dy)
            if _inside(step, size) and step not in blocked and step not in distance:
                distance[step] = distance[here] + 1
                queue.append(step)
    return None


def first_blocking_byte(coords: Sequence[Coord], size: int = SIZE) -> Coord:
    """The first byte after whose fall no path to the exit is left."""
    coords = list(coords)

    def cut_off(count: int) -> bool:
        return shortest_path(set(coords[: count + 1]), size) is None

    index = bisect_left(range(len(coords)), True, key=cut_off)
    if index == len(coords):
        raise ValueError("the exit stays reachable after every byte")
    return coords[index]


def part1(text: str) -> int:
    first = [coord for _, coord in zip(range(READ_AMOUNT), _raw_coords(text))]
    steps = shortest_path({coord for coord in first if _inside(coord, SIZE)})
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text: str) -> str:
    x, y = first_blocking_byte(parse_bytes(text))
    return f"{x},{y}"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Find a way out of corrupted memory.")
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