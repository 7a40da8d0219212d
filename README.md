# aoc2024

Solvers for the 2024 Advent of Code puzzles: days 1–9 and 14–21.
Each day lives in its own module (`aoc2024.day01`, `aoc2024.day02`, …)
and offers `part1(text)` and, where solved, `part2(text)`. Both take the
raw puzzle input as a string and return the answer. Day 6 has a first
part only. Every other day has both parts.

Two shared helpers live in `aoc2024.numtheory`: `gcd(a, b)` (Euclid's
algorithm on non-negative integers) and `shoelace(polygon)`, which gives
the area of a polygon of `(row, col)` vertices, rounded down.

## Installation

```
pip install .
```

No third-party libraries are needed. To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Every day has a command. Each command reads the puzzle input from the file
named as its argument, or from standard input when no file is given or the
argument is `-`. It prints the answer to each part on its own line.
`--part 1` or `--part 2` solves only that part.

```
aoc2024-day01 input.txt
aoc2024-day17 --part 1 < input.txt
```

The commands are `aoc2024-day01` through `aoc2024-day09` and
`aoc2024-day14` through `aoc2024-day21`. `aoc2024-day06` accepts only
`--part 1`.

Two commands print more than a number for part 2:

- `aoc2024-day14` prints the room as rows of per-cell robot counts,
  then the second at which the pattern appeared.
- `aoc2024-day17` prints a disassembly of the program, then a blank line,
  then `reg_a val N`, then the program's output for that value of A.

## Library use

```python
from aoc2024 import day01, day07

text = open("input.txt").read()
print(day01.part1(text))
print(day01.part2(text))

equations = day07.parse_equations(text)
```

Besides the `part` functions, each module exposes the building blocks it
uses, for example:

- `day02.is_safe(levels)` and `day02.is_safe_with_dampener(levels)`
- `day03.parse_mul(text, start)`, `day03.sum_products(text)` and
  `day03.sum_enabled_products(text)`
- `day04.count_xmas(lines)` and `day04.count_x_mas(lines)`
- `day05.parse_manual(text)`, `day05.is_ordered(update, rules)` and
  `day05.reorder(update, rules)`
- `day06.find_guard(lines)` and `day06.count_visited(lines)`
- `day07.can_produce(total, numbers)` and
  `day07.can_produce_with_concat(total, numbers)`
- `day08.antinodes(antennas, size)` and `day08.resonant_antinodes(antennas, size)`
- `day09.compact_blocks_checksum(sizes)` and `day09.compact_files_checksum(sizes)`
- `day14.position_after(robot, seconds, width, height)`,
  `day14.safety_factor(...)`, `day14.find_pattern(...)` and
  `day14.render(...)`, with the `Robot` class
- `day15.widen(lines)`, `day15.simulate(grid, moves)` and `day15.gps_sum(grid)`
- `day16.lowest_score(maze)` and `day16.best_path_tiles(maze)`
- `day17.run(program, registers)`, `day17.disassemble(program)` and
  `day17.find_quine_a(program, registers)`, with the `Registers` class
- `day18.shortest_path(blocked, size)` and `day18.first_blocking_byte(coords, size)`
- `day19.count_arrangements(design, towels)`
- `day20.trace_path(walls, start, end)` and
  `day20.count_cheats(path, max_cheat, min_saving)`
- `day21.sequence_length(code, robots)` and `day21.complexity(code, robots)`

Some sizes are fixed as the puzzles give them. Day 14 uses a 101 × 103
room and 100 seconds. Day 18 uses a 71 × 71 grid and the first 1024 bytes.
Day 20 counts cheats that save at least 100 steps. Day 21 puts 2 robots
in the chain for part 1 and 25 for part 2. The library functions take
these as arguments.

Many kinds of malformed input raise `ValueError`. Examples are a missing
guard, start or end tile, an unknown move character, or a map where no
answer exists.

## What is not included

The package has no solvers for days 10–13 or days 22–25. It does not
download puzzle input. The input must be supplied as a file or on
standard input.