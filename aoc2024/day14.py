"""Day 14: security robots wrapping around a bathroom floor."""

import argparse
import math
import re
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

WIDTH = 101
HEIGHT = 103
SECONDS = 100
NEIGHBOUR_THRESHOLD = 90

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+)\s+v=(-?\d+),(-?\d+)")

Position = tuple[int, int]


@dataclass(frozen=True)
class Robot:
    """A robot's starting (x, y) position and its velocity per second."""

    x: int
    y: int
    vx: int
    vy: int


def parse_robots(text: str) -> list[Robot]:
    """Parse ``p=x,y v=dx,dy`` lines; reading stops at the first empty line."""
    robots = []
    for line in text.splitlines():
        if not line:
            break
        match = _ROBOT.search(line)
        if match is None:
            raise ValueError(f"malformed robot {line!r}")
        robots.append(Robot(*(int(group) for group in match.groups())))
    return robots


def position_after(
    robot: Robot, seconds: int, width: int = WIDTH, height: int = HEIGHT
) -> Position:
    """Where the robot stands after ``seconds``, wrapping at the room's edges."""
    return (robot.x + robot.vx * seconds) % width, (robot.y + robot.vy * seconds) % height


def safety_factor(
    robots: Iterable[Robot],
    seconds: int = SECONDS,
    width: int = WIDTH,
    height: int = HEIGHT,
) -> int:
    """Product of the robot counts in the four quadrants; the middle lines count for none."""
    mid_x, mid_y = width >> 1, height >> 1
    quadrants: Counter[tuple[bool, bool]] = Counter()
    for robot in robots:
        x, y = position_after(robot, seconds, width, height)
        if x != mid_x and y != mid_y:
            quadrants[(y < mid_y, x < mid_x)] += 1
    return math.prod(quadrants[(top, left)] for top in (True, False) for left in (True, False))


def find_pattern(
    robots: Sequence[Robot],
    width: int = WIDTH,
    height: int = HEIGHT,
    threshold: int = NEIGHBOUR_THRESHOLD,
) -> tuple[int, list[Position]]:
    """First second at which more than ``threshold`` robots have a right-hand neighbour.

    Robots move one at a time, and each is checked right after its move.
    Returns the second and the positions then.
    """
    positions = [(robot.x, robot.y) for robot in robots]
    if any(not (0 <= x < width and 0 <= y < height) for x, y in positions):
        raise ValueError("a robot starts outside the room")
    occupied = Counter(positions)
    for second in range(1, math.lcm(width, height) + 1):
        neighbours = 0
        for index, robot in enumerate(robots):
            old = positions[index]
            new = ((old[0] + robot.vx) % width, (old[1] + robot.vy) % height)
            occupied[old] -= 1
            occupied[new] += 1
            positions[index] = new
            if occupied[(new[0] + 1, new[1])] > 0:
                neighbours += 1
        if neighbours > threshold:
            return second, positions
    raise ValueError("the robots never line up past the threshold")


def render(positions: Iterable[Position], width: int = WIDTH, height: int = HEIGHT) -> str:
    """Draw the room as rows of per-cell robot counts."""
    counts = Counter(positions)
    return "\n".join(
        "".join(str(counts[(x, y)]) for x in range(width)) for y in range(height)
    )


def part1(text: str) -> int:
    return safety_factor(parse_robots(text))


def part2(text: str) -> int:
    seconds, _ = find_pattern(parse_robots(text))
    return seconds


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate bathroom security robots.")
    parser.add_argument("input", nargs="?", default="-", help="puzzle input (default: stdin)")
    parser.add_argument("--part", type=int, choices=(1, 2), help="solve only this part")
    args = parser.parse_args(argv)
    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    for part in [args.part] if args.part else [1, 2]:
        if part == 1:
            print(part1(text))
        else:
            seconds, positions = find_pattern(parse_robots(text))
            print(render(positions))
            print(seconds)
    return 0


if __name__ == "__main__":
    sys.exit(main())