import pytest

from aoc2024 import day04

EXAMPLE = """\
MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""

ROWS = EXAMPLE.splitlines()


def _transpose(rows):
    return ["".join(column) for column in zip(*rows)]


def test_example_part1():
    assert day04.part1(EXAMPLE) == 18


def test_example_part2():
    assert day04.part2(EXAMPLE) == 9


def test_count_matches_parts():
    assert day04.count_xmas(ROWS) == day04.part1(EXAMPLE)
    assert day04.count_x_mas(ROWS) == day04.part2(EXAMPLE)


def test_transpose_keeps_counts():
    assert day04.count_xmas(_transpose(ROWS)) == day04.count_xmas(ROWS)
    assert day04.count_x_mas(_transpose(ROWS)) == day04.count_x_mas(ROWS)


def test_vertical_flip_keeps_counts():
    flipped = ROWS[::-1]
    assert day04.count_xmas(flipped) == day04.count_xmas(ROWS)
    assert day04.count_x_mas(flipped) == day04.count_x_mas(ROWS)


def test_horizontal_mirror_keeps_counts():
    mirrored = [row[::-1] for row in ROWS]
    assert day04.count_xmas(mirrored) == day04.count_xmas(ROWS)
    assert day04.count_x_mas(mirrored) == day04.count_x_mas(ROWS)


def test_reading_stops_at_blank_line():
    assert day04.part1(EXAMPLE + "\nXMAS\n") == day04.part1(EXAMPLE)


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        day04.count_xmas(["XMAS", "XM"])


def test_grid_without_letters_has_no_matches():
    assert day04.count_xmas(["....", "....", "....", "...."]) == 0
    assert day04.count_x_mas(["...", ".A.", "..."]) == 0