"""Day 9: compacting a disk map and computing its checksum."""

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from aoc2024.day01 import _leading_lines, _run_cli


@dataclass
class _Span:
    start: int
    length: int


def parse_disk(text: str) -> list[int]:
    """Return the digits of the disk map: file and free sizes alternating.

    The map is the last line before the first empty line.
    """
    lines = _leading_lines(text)
    map_line = lines[-1] if lines else ""
    if not map_line or not map_line.isdigit():
        raise ValueError(f"disk map must be a non-empty string of digits, got {map_line!r}")
    return [int(char) for char in map_line]


def compact_blocks_checksum(sizes: Sequence[int]) -> int:
    """Checksum after moving single blocks from the end into the first gaps."""
    blocks: list[int | None] = []
    for index, size in enumerate(sizes):
        blocks.extend([index // 2 if index % 2 == 0 else None] * size)

    checksum = 0
    left, right = 0, len(blocks) - 1
    while left <= right:
        if blocks[left] is not None:
            checksum += left * blocks[left]
            left += 1
        elif blocks[right] is None:
            right -= 1
        else:
            checksum += left * blocks[right]
            left += 1
            right -= 1
    return checksum


def compact_files_checksum(sizes: Sequence[int]) -> int:
    """Checksum after moving whole files, highest id first, into the leftmost gap that fits."""
    files: list[_Span] = []
    gaps: list[_Span] = []
    position = 0
    for index, size in enumerate(sizes):
        (files if index % 2 == 0 else gaps).append(_Span(position, size))
        position += size

    checksum = 0
    for file_id in reversed(range(len(files))):
        file = files[file_id]
        start = file.start
        for gap in gaps:
            if gap.start >= file.start:
                break
            if gap.length >= file.length:
                start = gap.start
                gap.start += file.length
                gap.length -= file.length
                break
        checksum += file_id * sum(range(start, start + file.length))
    return checksum


def part1(text: str) -> int:
    return compact_blocks_checksum(parse_disk(text))


def part2(text: str) -> int:
    return compact_files_checksum(parse_disk(text))


def main(argv=None) -> int:
    return _run_cli(argv, "Compact a disk map and print its checksum.", {1: part1, 2: part2})


if __name__ == "__main__":
    sys.exit(main())