"""Day 5: checking and fixing the page order of safety-manual updates."""

import sys
from collections import defaultdict
from collections.abc import Mapping, Sequence, Set

from aoc2024.day01 import _run_cli

Rules = Mapping[int, Set[int]]


def parse_manual(text: str) -> tuple[dict[int, set[int]], list[list[int]]]:
    """Parse ``X|Y`` ordering rules and the comma-separated updates after them.

    The rules map each page to the pages that must come after it.
    """
    rules: defaultdict[int, set[int]] = defaultdict(set)
    updates: list[list[int]] = []
    in_updates = False
    for line in text.splitlines():
        if not line:
            in_updates = True
            continue
        if in_updates:
            updates.append([int(field) for field in line.split(",") if field.strip()])
        else:
            before, sep, after = line.partition("|")
            if not sep:
                raise ValueError(f"malformed rule {line!r}")
            rules[int(before)].add(int(after))
    return dict(rules), updates


def is_ordered(update: Sequence[int], rules: Rules) -> bool:
    """True when no page is preceded by a page that must come after it."""
    seen: set[int] = set()
    for page in update:
        if rules.get(page, set()) & seen:
            return False
        seen.add(page)
    return True


def reorder(update: Sequence[int], rules: Rules) -> list[int]:
    """Return the update reordered so that every rule is followed.

    On each violation the page swaps with the earliest page it must precede,
    and the check starts again from the beginning.
    """
    pages = list(update)
    restart = True
    while restart:
        restart = False
        positions: dict[int, int] = {}
        for index, page in enumerate(pages):
            positions[page] = index
            clashes = [positions[after] for after in rules.get(page, ()) if after in positions]
            if clashes:
                earliest = min(clashes)
                pages[index], pages[earliest] = pages[earliest], pages[index]
                restart = True
                break
    return pages


def _middle(pages: Sequence[int]) -> int:
    return pages[(len(pages) - 1) // 2]


def part1(text: str) -> int:
    rules, updates = parse_manual(text)
    return sum(_middle(update) for update in updates if is_ordered(update, rules))


def part2(text: str) -> int:
    rules, updates = parse_manual(text)
    return sum(
        _middle(reorder(update, rules))
        for update in updates
        if not is_ordered(update, rules)
    )


def main(argv=None) -> int:
    return _run_cli(argv, "Check safety-manual update ordering.", {1: part1, 2: part2})


if __name__ == "__main__":
    sys.exit(main())