"""Day 17: a three-bit computer, and the register value that makes it print itself."""

import argparse
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import IntEnum

_NUMBER = re.compile(r"-?\d+")
_COMBO_NAMES = ("0", "1", "2", "3", "reg_a", "reg_b", "reg_c")


class Opcode(IntEnum):
    ADV = 0
    BXL = 1
    BST = 2
    JNZ = 3
    BXC = 4
    OUT = 5
    BDV = 6
    CDV = 7


@dataclass(frozen=True)
class Registers:
    """The three registers of the machine."""

    a: int = 0
    b: int = 0
    c: int = 0


def parse_program(text: str) -> tuple[Registers, list[int]]:
    """Read registers A, B and C and then the program from the first four non-empty lines."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 4:
        raise ValueError("expected three register lines and a program line")
    values = []
    for line in lines[:3]:
        match = _NUMBER.search(line)
        if match is None:
            raise ValueError(f"register line without a value: {line!r}")
        values.append(int(match.group()))
    program = [int(field) for field in _NUMBER.findall(lines[3])]
    if not program:
        raise ValueError("the program is empty")
    return Registers(*values), program


def _combo(operand: int, a: int, b: int, c: int) -> int:
    if 0 <= operand <= 3:
        return operand
    if operand == 4:
        return a
    if operand == 5:
        return b
    if operand == 6:
        return c
    raise ValueError(f"invalid combo operand {operand}")


def _combo_name(operand: int) -> str:
    if 0 <= operand < len(_COMBO_NAMES):
        return _COMBO_NAMES[operand]
    raise ValueError(f"invalid combo operand {operand}")


def run(program: Sequence[int], registers: Registers) -> list[int]:
    """Run the program from the given registers and return the values it outputs."""
    if len(program) % 2:
        raise ValueError("the program must be made of opcode and operand pairs")
    a, b, c = registers.a, registers.b, registers.c
    output: list[int] = []
    pointer = 0
    while 0 <= pointer < len(program):
        opcode, operand = program[pointer], program[pointer + 1]
        if opcode == Opcode.ADV:
            a >>= _combo(operand, a, b, c)
        elif opcode == Opcode.BXL:
            b ^= operand
        elif opcode == Opcode.BST:
            b = _combo(operand, a, b, c) % 8
        elif opcode == Opcode.JNZ:
            if a != 0:
                pointer = operand
                continue
        elif opcode == Opcode.BXC:
            b ^= c
        elif opcode == Opcode.OUT:
            output.append(_combo(operand, a, b, c) % 8)
        elif opcode == Opcode.BDV:
            b = a >> _combo(operand, a, b, c)
        elif opcode == Opcode.CDV:
            c = a >> _combo(operand, a, b, c)
        pointer += 2
    return output


def disassemble(program: Sequence[int]) -> list[str]:
    """One readable line per instruction: mnemonic, source and destination."""
    lines = []
    for pointer in range(0, len(program) - 1, 2):
        opcode, operand = program[pointer], program[pointer + 1]
        if opcode == Opcode.ADV:
            lines.append(f"adv {_combo_name(operand)} reg_a")
        elif opcode == Opcode.BXL:
            lines.append(f"bxl {operand} reg_b")
        elif opcode == Opcode.BST:
            lines.append(f"bst {_combo_name(operand)} reg_b")
        elif opcode == Opcode.JNZ:
            lines.append(f"jnz {operand} reg_a")
        elif opcode == Opcode.BXC:
            lines.append("bxc reg_c reg_b")
        elif opcode == Opcode.OUT:
            lines.append(f"out {_combo_name(operand)}")
        elif opcode == Opcode.BDV:
            lines.append(f"bdv {_combo_name(operand)} reg_b")
        elif opcode == Opcode.CDV:
            lines.append(f"cdv {_combo_name(operand)} reg_c")
    return lines


def _search(program: Sequence[int], place: int, registers: Registers) -> int | None:
    if place < 0:
        return registers.a >> 3
    a = registers.a
    for _ in range(8):
        output = run(program, replace(registers, a=a))
        if output and output[0] == program[place]:
            found = _search(program, place - 1, replace(registers, a=a << 3))
            if found is not None:
                return found
        a += 1
    return None


def find_quine_a(program: Sequence[int], registers: Registers) -> int:
    """Lowest register A value found for which the program outputs itself.

    Works backwards through the program three bits of A at a time,
    trying every choice of the bits; B and C are taken from ``registers``.
    """
    program = list(program)
    if not program:
        raise ValueError("the program is empty")
    found = _search(program, len(program) - 1, replace(registers, a=0))
    if found is None:
        raise ValueError("no value of register A makes the program output itself")
    return found


def _joined(values: Sequence[int]) -> str:
    return ",".join(str(value) for value in values)


def part1(text: str) -> str:
    registers, program = parse_program(text)
    return _joined(run(program, registers))


def part2(text: str) -> int:
    registers, program = parse_program(text)
    return find_quine_a(program, registers)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Emulate the three-bit computer.")
    parser.add_argument("input", nargs="?", default="-", help="puzzle input (default: stdin)")
    parser.add_argument("--part", type=int, choices=(1, 2), help="solve only this part")
    args = parser.parse_args(argv)
    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    for part in [args.part] if args.part else [1, 2]:
        if part == 1:
            print(part1(text))
        else:
            registers, program = parse_program(text)
            for line in disassemble(program):
                print(line)
            print()
            a = find_quine_a(program, registers)
            print(f"reg_a val {a}")
            print(_joined(run(program, replace(registers, a=a))))
    return 0


if __name__ == "__main__":
    sys.exit(main())