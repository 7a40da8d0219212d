"""Day 7: deciding which calibration equations can be made true."""

import argparse
import sys
from collections.abc import Sequence


def parse_equations(text: str) -> list[tuple[int, list[int]]]:
    """Parse ``total: n1 n2 ...`` lines; reading stops at the first empty line."""
    equations = []
    for line in text.splitlines():
        if not line:
            break
        total, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"malformed equation {line!r}")
        equations.append((int(total), [int(field) for field in rest.split()]))
    return equations


def _checked(numbers: Sequence[int]) -> list[int]:
    values = list(numbers)
    if not values:
        raise ValueError("an equation needs at least one number")
    if any(value <= 0 for value in values):
        raise ValueError("equation numbers must be positive")
    return values


def _digit_shift(number: int) -> int:
    """Power of ten that shifts past ``number``; numbers over 99 count as three digits."""
    if number < 10:
        return 10
    if number < 100:
        return 100
    return 1000


def _possible(total: int, numbers: list[int], count: int, concat: bool) -> bool:
    """Work backwards from the last number, undoing + , * and (optionally) ||."""
    remaining = total
    for index in range(count - 1, 0, -1):
        number = numbers[index]
        if concat:
            shift = _digit_shift(number)
            if remaining % shift == number and _possible(
                (remaining - number) // shift, numbers, index, concat
            ):
                return True
        if remaining <= 0:
            break
        if remaining % number == 0:
            if _possible(remaining - number, numbers, index, concat):
                return True
            remaining //= number
        else:
            remaining -= number
    return remaining == numbers[0]


def can_produce(total: int, numbers: Sequence[int]) -> bool:
    """True when + and * placed left to right between the numbers give ``total``."""
    values = _checked(numbers)
    return _possible(total, values, len(values), concat=False)


def can_produce_with_concat(total: int, numbers: Sequence[int]) -> bool:
    """Like can_produce, with digit concatenation as a third operator."""
    values = _checked(numbers)
    return _possible(total, values, len(values), concat=True)


def part1(text: str) -> int:
    return sum(total for total, numbers in parse_equations(text) if can_produce(total, numbers))


def part2(text: str) -> int:
    return sum(
        total
        for total, numbers in parse_equations(text)
        if can_produce_with_concat(total, numbers)
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Sum the calibration totals that can be made true.")
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