"""Day 16: the cheapest routes through a reindeer maze."""

import argparse
import heapq
import sys
from collections import defaultdict
from collections.abc import Sequence

Position = tuple[int, int]
State = tuple[Position, int]

# North, east, south, west: turning right moves one step along this tuple.
_HEADINGS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_EAST = 1
_STEP_COST = 1
_TURN_COST = 1000
_WALL = "#"


def parse_maze(text: str) -> list[str]:
    """Return the maze rows; reading stops at the first empty line."""
    rows = []
    for line in text.splitlines():
        if not line:
            break
        rows.append(line)
    _locate(rows, "S")
    _locate(rows, "E")
    return rows


def _locate(maze: Sequence[str], mark: str) -> Position:
    for row, line in enumerate(maze):
        col = line.find(mark)
        if col != -1:
            return row, col
    raise ValueError(f"the maze has no {mark!r} tile")


def _open(maze: Sequence[str], position: Position) -> bool:
    row, col = position
    return 0 <= row < len(maze) and 0 <= col < len(maze[row]) and maze[row][col] != _WALL


def _search(
    maze: Sequence[str],
) -> tuple[dict[State, int], dict[State, set[State]], Position]:
    """Dijkstra over (position, heading) states starting east from S.

    Each move either steps forward, or turns a quarter left or right and
    steps in the new direction. Returns the best scores, the predecessors
    on best routes, and the end position.
    """
    start = _locate(maze, "S")
    end = _locate(maze, "E")
    best: dict[State, int] = {(start, _EAST): 0}
    predecessors: dict[State, set[State]] = defaultdict(set)
    heap = [(0, start, _EAST)]
    while heap:
        score, position, heading = heapq.heappop(heap)
        if score > best[(position, heading)] or position == end:
            continue
        choices = (
            (heading, _STEP_COST),
            ((heading - 1) % 4, _TURN_COST + _STEP_COST),
            ((heading + 1) % 4, _TURN_COST + _STEP_COST),
        )
        for new_heading, cost in choices:
            dr, dc = _HEADINGS[new_heading]
            step = (position[0] + dr, position[1] + dc)
            if not _open(maze, step):
                continue
            state = (step, new_heading)
            new_score = score + cost
            old = best.get(state)
            if old is None or new_score < old:
                best[state] = new_score
                predecessors[state] = {(position, heading)}
                heapq.heappush(heap, (new_score, step, new_heading))
            elif new_score == old:
                predecessors[state].add((position, heading))
    return best, predecessors, end


def _end_states(best: dict[State, int], end: Position) -> tuple[int, list[State]]:
    scores = {state: score for state, score in best.items() if state[0] == end}
    if not scores:
        raise ValueError("the end cannot be reached")
    lowest = min(scores.values())
    return lowest, [state for state, score in scores.items() if score == lowest]


def lowest_score(maze: Sequence[str]) -> int:
    """The lowest score of any route from S to E."""
    best, _, end = _search(maze)
    lowest, _ = _end_states(best, end)
    return lowest


def best_path_tiles(maze: Sequence[str]) -> set[Position]:
    """Every tile, S and E included, that lies on at least one lowest-score route."""
    best, predecessors, end = _search(maze)
    _, pending = _end_states(best, end)
    seen = set(pending)
    while pending:
        state = pending.pop()
        for previous in predecessors.get(state, ()):
            if previous not in seen:
                seen.add(previous)
                pending.append(previous)
    return {position for position, _ in seen}


def part1(text: str) -> int:
    return lowest_score(parse_maze(text))


def part2(text: str) -> int:
    return len(best_path_tiles(parse_maze(text)))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Score the best routes through a maze.")
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