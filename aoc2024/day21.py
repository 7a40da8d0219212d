"""Day 21: shortest button sequences through chains of keypad-pressing robots."""

import argparse
import re
import sys
from dataclasses import dataclass
from functools import lru_cache
from itertools import pairwise

Position = tuple[int, int]

_FEW_ROBOTS = 2
_MANY_ROBOTS = 25
_LEADING_DIGITS = re.compile(r"\d+")


@dataclass(frozen=True)
class _Pad:
    keys: dict[str, Position]
    gap: Position


_NUMERIC = _Pad(
    keys={
        "7": (0, 0), "8": (0, 1), "9": (0, 2),
        "4": (1, 0), "5": (1, 1), "6": (1, 2),
        "1": (2, 0), "2": (2, 1), "3": (2, 2),
        "0": (3, 1), "A": (3, 2),
    },
    gap=(3, 0),
)

_DIRECTIONAL = _Pad(
    keys={"^": (0, 1), "A": (0, 2), "<": (1, 0), "v": (1, 1), ">": (1, 2)},
    gap=(0, 0),
)


def _candidates(pad: _Pad, source: str, target: str) -> tuple[str, ...]:
    """Button presses that move from ``source`` to ``target`` and press it.

    Each turns at most once; both orders are offered unless one crosses the gap.
    """
    try:
        r1, c1 = pad.keys[source]
        r2, c2 = pad.keys[target]
    except KeyError as error:
        raise ValueError(f"no key {error.args[0]!r} on this keypad") from None
    vertical = ("v" if r2 > r1 else "^") * abs(r2 - r1)
    horizontal = (">" if c2 > c1 else "<") * abs(c2 - c1)
    if (r2, c1) == pad.gap:
        return (horizontal + vertical + "A",)
    if (r1, c2) == pad.gap:
        return (vertical + horizontal + "A",)
    return (vertical + horizontal + "A", horizontal + vertical + "A")


@lru_cache(maxsize=None)
def _expanded_length(sequence: str, robots: int) -> int:
    """Presses needed to type ``sequence`` on a directional pad through ``robots`` more pads."""
    if robots == 0:
        return len(sequence)
    return sum(
        min(_expanded_length(option, robots - 1) for option in _candidates(_DIRECTIONAL, a, b))
        for a, b in pairwise("A" + sequence)
    )


def sequence_length(code: str, robots: int) -> int:
    """Length of the shortest human input that types ``code`` on the numeric keypad.

    ``robots`` directional-keypad robots stand between the human and the
    robot at the numeric keypad; every arm starts on ``A``.
    """
    if robots < 0:
        raise ValueError("the number of robots cannot be negative")
    code = code.strip()
    return sum(
        min(_expanded_length(option, robots) for option in _candidates(_NUMERIC, a, b))
        for a, b in pairwise("A" + code)
    )


def _numeric_part(code: str) -> int:
    token = next((part for part in code.strip().split("A") if part), "")
    match = _LEADING_DIGITS.match(token)
    return int(match.group()) if match else 0


def complexity(code: str, robots: int) -> int:
    """The code's numeric part times the length of its shortest input."""
    return _numeric_part(code) * sequence_length(code, robots)


def _codes(text: str) -> list[str]:
    codes = []
    for line in text.splitlines():
        if not line:
            break
        codes.append(line)
    return codes


def part1(text: str) -> int:
    return sum(complexity(code, _FEW_ROBOTS) for code in _codes(text))


def part2(text: str) -> int:
    return sum(complexity(code, _MANY_ROBOTS) for code in _codes(text))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Sum door-code complexities through keypad robots.")
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