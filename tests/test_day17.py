import pytest

from aoc2024.day17 import (
    Registers,
    disassemble,
    find_quine_a,
    main,
    parse_program,
    part1,
    part2,
    run,
)

EXAMPLE = """Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0
"""

QUINE = """Register A: 2024
Register B: 0
Register C: 0

Program: 0,3,5,4,3,0
"""


def test_parse_program():
    registers, program = parse_program(EXAMPLE)
    assert registers == Registers(729, 0, 0)
    assert program == [0, 1, 5, 4, 3, 0]


def test_parse_program_needs_four_lines():
    with pytest.raises(ValueError):
        parse_program("Register A: 1\nRegister B: 0\n")


def test_part1_example():
    assert part1(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_run_outputs_in_order():
    assert run([5, 0, 5, 1, 5, 4], Registers(10, 0, 0)) == [0, 1, 2]


def test_run_rejects_combo_seven():
    with pytest.raises(ValueError):
        run([2, 7], Registers(1, 0, 0))


def test_run_rejects_odd_length():
    with pytest.raises(ValueError):
        run([5, 4, 3], Registers(1, 0, 0))


def test_run_output_values_are_three_bits():
    output = run([0, 1, 5, 4, 3, 0], Registers(123456789, 0, 0))
    assert output
    assert all(0 <= value < 8 for value in output)


def test_find_quine_example():
    registers, program = parse_program(QUINE)
    assert find_quine_a(program, registers) == 117440


def test_quine_reproduces_program():
    registers, program = parse_program(QUINE)
    a = find_quine_a(program, registers)
    assert run(program, Registers(a, registers.b, registers.c)) == program


def test_part2_matches_search():
    registers, program = parse_program(QUINE)
    assert part2(QUINE) == find_quine_a(program, registers)


def test_find_quine_without_solution_raises():
    with pytest.raises(ValueError):
        find_quine_a([5, 1], Registers())


def test_disassemble_simple_program():
    assert disassemble([0, 3, 5, 4, 3, 0]) == ["adv 3 reg_a", "out reg_a", "jnz 0 reg_a"]


def test_disassemble_other_instructions():
    assert disassemble([1, 7, 2, 5, 4, 0, 6, 6, 7, 4]) == [
        "bxl 7 reg_b",
        "bst reg_b reg_b",
        "bxc reg_c reg_b",
        "bdv reg_c reg_b",
        "cdv reg_a reg_c",
    ]


def test_disassemble_rejects_combo_seven():
    with pytest.raises(ValueError):
        disassemble([5, 7])


def test_main_part1(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path), "--part", "1"]) == 0
    assert capsys.readouterr().out.strip() == part1(EXAMPLE)