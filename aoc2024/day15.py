"""Day 15: a robot pushing boxes around a warehouse."""

import argparse
import sys
from collections.abc import Iterable, Sequence

Position = tuple[int, int]

_MOVES = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}
_BOXES = frozenset("O[]")
_WIDE = {".": "..", "#": "##", "@": "@.", "O": "[]"}
_ROBOT = "@"
_WALL = "#"


def parse_input(text: str) -> tuple[list[str], str]:
    """Split the puzzle into warehouse rows and the joined string of moves.

    The rows come before the first empty line; every non-empty line after it
    holds moves.
    """
    grid: list[str] = []
    move_lines: list[str] = []
    in_moves = False
    for line in text.splitlines():
        if not line:
            in_moves = True
            continue
        (move_lines if in_moves else grid).append(line)
    moves = "".join(move_lines)
    unknown = sorted(set(moves) - _MOVES.keys())
    if unknown:
        raise ValueError(f"unrecognized move characters: {''.join(unknown)!r}")
    return grid, moves


def widen(lines: Iterable[str]) -> list[str]:
    """Double every tile's width; boxes become ``[]`` and the robot ``@.``."""
    wide = []
    for line in lines:
        try:
            wide.append("".join(_WIDE[char] for char in line))
        except KeyError as error:
            raise ValueError(f"unexpected warehouse tile {error.args[0]!r}") from None
    return wide


def _find_robot(cells: list[list[str]]) -> Position:
    for row, line in enumerate(cells):
        for col, char in enumerate(line):
            if char == _ROBOT:
                return row, col
    raise ValueError("the warehouse has no robot")


def _tile(cells: list[list[str]], position: Position) -> str:
    row, col = position
    if 0 <= row < len(cells) and 0 <= col < len(cells[row]):
        return cells[row][col]
    return _WALL


def _push(cells: list[list[str]], robot: Position, dr: int, dc: int) -> Position:
    """Move the robot one step, shoving every box in the way, unless a wall blocks."""
    to_move = [robot]
    seen = {robot}
    index = 0
    while index < len(to_move):
        row, col = to_move[index]
        index += 1
        target = (row + dr, col + dc)
        char = _tile(cells, target)
        if char == _WALL:
            return robot
        if char not in _BOXES or target in seen:
            continue
        group = [target]
        if char == "[":
            group.append((target[0], target[1] + 1))
        elif char == "]":
            group.append((target[0], target[1] - 1))
        for cell in group:
            if cell not in seen:
                seen.add(cell)
                to_move.append(cell)

    moved = {cell: cells[cell[0]][cell[1]] for cell in to_move}
    for row, col in moved:
        cells[row][col] = "."
    for (row, col), char in moved.items():
        cells[row + dr][col + dc] = char
    return robot[0] + dr, robot[1] + dc


def simulate(grid: Sequence[str], moves: str) -> list[str]:
    """Return the warehouse after the robot has made every move."""
    cells = [list(row) for row in grid]
    robot = _find_robot(cells)
    for move in moves:
        try:
            dr, dc = _MOVES[move]
        except KeyError:
            raise ValueError(f"unrecognized move {move!r}") from None
        robot = _push(cells, robot, dr, dc)
    return ["".join(row) for row in cells]


def gps_sum(grid: Sequence[str]) -> int:
    """Sum of 100 * row + column over every box (its left edge when wide)."""
    return sum(
        100 * row + col
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char in "O["
    )


def part1(text: str) -> int:
    grid, moves = parse_input(text)
    return gps_sum(simulate(grid, moves))


def part2(text: str) -> int:
    grid, moves = parse_input(text)
    return gps_sum(simulate(widen(grid), moves))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Simulate a box-pushing warehouse robot.")
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