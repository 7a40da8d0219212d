import pytest

from aoc2024.day02 import (
    is_safe,
    is_safe_with_dampener,
    main,
    parse_reports,
    part1,
    part2,
)

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_parse_reports():
    reports = parse_reports(EXAMPLE)
    assert reports[0] == [7, 6, 4, 2, 1]
    assert len(reports) == len(EXAMPLE.splitlines())


def test_parse_reports_stops_at_blank_line():
    assert parse_reports("1 2 3\n\n4 5 6\n") == [[1, 2, 3]]


def test_is_safe_examples():
    assert is_safe([7, 6, 4, 2, 1])
    assert is_safe([1, 3, 6, 7, 9])
    assert not is_safe([1, 2, 7, 8, 9])
    assert not is_safe([9, 7, 6, 2, 1])
    assert not is_safe([1, 3, 2, 4, 5])
    assert not is_safe([8, 6, 4, 4, 1])


def test_dampener_examples():
    assert is_safe_with_dampener([1, 3, 2, 4, 5])
    assert is_safe_with_dampener([8, 6, 4, 4, 1])
    assert not is_safe_with_dampener([1, 2, 7, 8, 9])
    assert not is_safe_with_dampener([9, 7, 6, 2, 1])


def test_dampener_drops_trailing_outlier():
    assert not is_safe([1, 2, 3, 4, 100])
    assert is_safe_with_dampener([1, 2, 3, 4, 100])


def test_dampener_drops_leading_outlier():
    assert not is_safe([50, 1, 2, 3])
    assert is_safe_with_dampener([50, 1, 2, 3])


def test_safety_is_preserved_under_reversal():
    for report in parse_reports(EXAMPLE):
        assert is_safe(report) == is_safe(report[::-1])


def test_safe_implies_safe_with_dampener():
    for report in parse_reports(EXAMPLE):
        if is_safe(report):
            assert is_safe_with_dampener(report)


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_example():
    assert part2(EXAMPLE) == 4


def test_part2_at_least_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


@pytest.mark.parametrize("check", [is_safe, is_safe_with_dampener])
def test_single_level_report_rejected(check):
    with pytest.raises(ValueError):
        check([5])


def test_main_part1(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path), "--part", "1"])
    assert capsys.readouterr().out == f"{part1(EXAMPLE)}\n"