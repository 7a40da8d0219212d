import pytest

from aoc2024.day15 import gps_sum, parse_input, part1, part2, simulate, widen

SMALL = """\
########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

LARGE = """\
##########
#..O..O.O#
#......O.#
#.OO..O.O#
#..O@..O.#
#O#..O...#
#O..O..O.#
#.OO.O.OO#
#....O...#
##########

<vv>^<v^>v>^vv^v>v<>v^v<v<^vv<<<^><<><>>v<vvv<>^v^>^<<<><<v<<<v^vv^v>^
vvv<<^>^v^^><<>>><>^<<><^vv^^<>vvv<>><^^v>^>vv<>v<<<<v<^v>^<^^>>>^<v<v
><>vv>v^v^<>><>>>><^^>vv>v<^^^>>v^v^<^^>v^^>v^<^v>v<>>v^v^<v>v^^<^^vv<
<<v<^>>^^^^>>>v^<>vvv^><v<<<>^^^vv^<vvv>^>v<^^^^v<>^>vvvv><>>v^<<^^^^^
^><^><>>><>^^<<^^v>>><^<v>^<vv>>v>>>^v><>^v><<<<v>>v<v<v>vvv>^<><<>^><
^>><>^v<><^vvv<^^<><v<<<<<><^v<<<><<<^^<v<^^^><^>>^<v^><<<^>>^v<v^v<v^
>^>>^v>vv>^<<^v<>><<><<v<<v><>v<^vv<<<>^^v^>^^>>><<^v>>v^v><^^>>^<>vv^
<><^^>^^^<><vvvvv^v<v<<>^v<v>v<<^><<><<><<<^^<<<^<<>><<><^^^>^^<>^>v<>
^^>vv<^v^v<vv>^<><v<^v>^^^>>>^^vvv^>vvv<>>>^<^>>>>>^<<^v>^vvv<>^<><<v>
v^^>>><<^^<>>^v^<v^vv<>v^<<>^<^v^v><^<<<><<^<v><v<>vv>>v><v^<vv<>v^<<^
"""


def _count(grid, chars):
    return sum(line.count(char) for line in grid for char in chars)


def _positions(grid, char):
    return {(r, c) for r, line in enumerate(grid) for c, ch in enumerate(line) if ch == char}


def test_part1_small_example():
    assert part1(SMALL) == 2028


def test_part1_large_example():
    assert part1(LARGE) == 10092


def test_part2_large_example():
    assert part2(LARGE) == 9021


def test_parse_input_splits_grid_and_moves():
    grid, moves = parse_input(SMALL)
    assert grid == SMALL.split("\n\n")[0].splitlines()
    assert moves == SMALL.split("\n\n")[1].strip()


def test_parse_input_rejects_unknown_moves():
    with pytest.raises(ValueError):
        parse_input("#@.#\n\n>x<\n")


def test_widen_doubles_each_row():
    grid, _ = parse_input(LARGE)
    wide = widen(grid)
    assert [len(row) for row in wide] == [2 * len(row) for row in grid]
    assert _count(wide, "[") == _count(grid, "O")
    assert _count(wide, "]") == _count(grid, "O")
    assert _count(wide, "@") == 1


def test_widen_rejects_unknown_tile():
    with pytest.raises(ValueError):
        widen(["#.X#"])


def test_simulate_preserves_walls_and_boxes():
    grid, moves = parse_input(LARGE)
    after = simulate(grid, moves)
    assert _positions(after, "#") == _positions(grid, "#")
    assert _count(after, "O") == _count(grid, "O")
    assert _count(after, "@") == 1


def test_simulate_wide_keeps_boxes_whole():
    grid, moves = parse_input(LARGE)
    after = simulate(widen(grid), moves)
    for line in after:
        for col, char in enumerate(line):
            if char == "[":
                assert line[col + 1] == "]"
            if char == "]":
                assert line[col - 1] == "["
    assert _count(after, "[") == _count(grid, "O")


def test_push_into_wall_changes_nothing():
    grid = ["#####", "#@OO#", "#####"]
    assert simulate(grid, ">") == grid


def test_push_moves_box_along():
    grid = ["######", "#@O..#", "######"]
    after = simulate(grid, ">")
    assert after[1].index("@") == grid[1].index("@") + 1
    assert after[1].index("O") == grid[1].index("O") + 1


def test_simulate_without_robot_raises():
    with pytest.raises(ValueError):
        simulate(["#..#"], ">")


def test_gps_sum_matches_simulated_moves_in_wide_and_narrow():
    grid, _ = parse_input(SMALL)
    assert gps_sum(simulate(grid, "")) == gps_sum(grid)