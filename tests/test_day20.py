import pytest

from aoc2024.day20 import count_cheats, parse_track, part1, part2, trace_path

EXAMPLE = """\
###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""


@pytest.fixture
def track():
    return parse_track(EXAMPLE)


@pytest.fixture
def path(track):
    walls, start, end, _ = track
    return trace_path(walls, start, end)


def test_parse_track_finds_start_and_end(track):
    walls, start, end, size = track
    lines = EXAMPLE.splitlines()
    assert lines[start[0]][start[1]] == "S"
    assert lines[end[0]][end[1]] == "E"
    assert size == len(lines)
    assert start not in walls and end not in walls


def test_parse_track_requires_start_and_end():
    with pytest.raises(ValueError):
        parse_track("###\n#.#\n###\n")


def test_parse_track_rejects_unknown_tile():
    with pytest.raises(ValueError):
        parse_track("#####\n#SxE#\n#####\n")


def test_trace_path_example_length(path):
    assert len(path) == 85


def test_trace_path_is_a_connected_walk(track, path):
    walls, start, end, _ = track
    assert path[0] == start
    assert path[-1] == end
    assert len(set(path)) == len(path)
    assert not set(path) & walls
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_trace_path_dead_end_raises():
    walls, start, end, _ = parse_track("#####\n#S#E#\n#####\n")
    with pytest.raises(ValueError):
        trace_path(walls, start, end)


def test_short_cheats_in_example(path):
    assert count_cheats(path, 2, 1) == 44


def test_long_cheats_in_example(path):
    assert count_cheats(path, 20, 50) == 285


def test_cheat_count_falls_as_saving_grows(path):
    counts = [count_cheats(path, 2, saving) for saving in range(1, 70)]
    assert all(a >= b for a, b in zip(counts, counts[1:]))


def test_longer_cheats_find_at_least_as_many(path):
    for saving in (1, 10, 50):
        assert count_cheats(path, 20, saving) >= count_cheats(path, 2, saving)


def test_negative_cheat_length_raises(path):
    with pytest.raises(ValueError):
        count_cheats(path, -1, 1)


def test_parts_agree_with_cheat_counts_on_example(path):
    assert part1(EXAMPLE) == count_cheats(path, 2, 100)
    assert part2(EXAMPLE) == count_cheats(path, 20, 100)