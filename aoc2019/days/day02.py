"""Restoring the gravity assist program."""

from __future__ import annotations

from typing import Sequence

from aoc2019.intcode.core import LogicError
from aoc2019.intcode.cpu import CPU, parse_code
from aoc2019.runner import load_input, run_parts

TARGET = 19690720


def part1(text: str) -> int:
    cpu = CPU(parse_code(text))
    cpu.memory.set(1, 12)
    cpu.memory.set(2, 2)
    cpu.run()
    return cpu.memory.get(0)


def part2(text: str) -> int:
    """Find 100 * noun + verb producing the target at address 0."""
    cpu = CPU(parse_code(text))
    for noun in range(100):
        for verb in range(100):
            cpu.reset()
            cpu.memory.set(1, noun)
            cpu.memory.set(2, verb)
            cpu.run()
            if cpu.memory.get(0) == TARGET:
                return 100 * noun + verb
    raise LogicError("No solution found")


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day02.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()