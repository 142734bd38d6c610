# aoc2019

Solutions to all twenty-five days of the 2019 Advent of Code, together with
the small library they share:

- `aoc2019.intcode.cpu`: the Intcode machine (`CPU`, `Memory`,
  `parse_code`).
- `aoc2019.intcode.core`: the `Runnable` base class with `run()`,
  `run_until_output()` and `wrap()`, the `IOWrapper` that joins a device to a
  machine, the step results `Signal` and `Output`, and the `IntcodeError`
  family of exceptions.
- `aoc2019.intcode.devices`: ready-made I/O devices (`Bus`, `IOQueues`,
  `ConstInput`, `Last`, `IntQueue`, `CharQueue`).
- `aoc2019.grid`: rectangular grids addressed by `Position`, with
  `Direction` turns and neighbour lookup.
- `aoc2019.points`: `Point2D` and `Point3D` arithmetic and `Direction2D`
  unit steps.
- `aoc2019.numtheory`: `gcd`, `lcm` and `inverse_mod`.
- `aoc2019.parsers`: `parse_unsigned` and `parse_signed`, which read a
  leading integer and return it with the rest of the text.
- `aoc2019.runner`: `load_input` and `run_parts`, shared by the daily
  commands.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running a day

Every day has its own command, `aoc2019-day01` through `aoc2019-day25`.
Give it the path of your puzzle input:

```
aoc2019-day01 input/day01.txt
```

Without an argument the command reads `input/dayNN.txt` relative to the
current directory. Trailing line breaks in the file are ignored. Each part is
printed on its own line together with how long it took in microseconds, for
example:

```
Part 1: 3363929 (Time: 41μs)
Part 2: 5043026 (Time: 58μs)
```

Day 8 prints its part-two image to the terminal and then reports
`See above`. Day 11's part-two answer is the painted registration drawn with
`#` and `.`. Day 25 is interactive: the adventure's text is printed as it
arrives and your commands are read from standard input, one per line.

## Using the library

Each day module exposes `part1(text)` and `part2(text)` (day 25 has only
`part1`), which take the puzzle input as a string and return the answer:

```python
from aoc2019.days import day06

orbits = "COM)B\nB)C\nC)D"
print(day06.part1(orbits))  # 6
```

The Intcode machine can be driven directly:

```python
from aoc2019.intcode.cpu import CPU

cpu = CPU.parse("1,9,10,3,2,3,11,0,99,30,40,50")
cpu.run()
print(cpu.memory.get(0))  # 3500
```

A machine can be given a device with `wrap()`. The device supplies
`provide_input()`, `receive_input(value)` and `handle_output(value)`:

```python
from aoc2019.intcode.cpu import CPU
from aoc2019.intcode.devices import Bus, ConstInput, Last

out = Last()
CPU.parse("3,0,4,0,99").wrap(Bus(ConstInput(7), out)).run()
print(out.value)  # 7
```

Errors raised while running (`BadOpCode`, `BadParameterMode`,
`WriteToImmediate`, `ParsingFailure`, `LogicError`, `ExpectedOutput`,
`InputFailure`) are all subclasses of `IntcodeError` from
`aoc2019.intcode.core`.

## What is not included

The package holds no puzzle inputs. Every command needs an input file that
you supply.