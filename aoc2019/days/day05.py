"""Running the diagnostic program with a fixed system ID."""

from __future__ import annotations

from typing import Sequence

from aoc2019.intcode.core import ExpectedOutput
from aoc2019.intcode.cpu import CPU
from aoc2019.intcode.devices import Bus, ConstInput, Last
from aoc2019.runner import load_input, run_parts


def run_with_input(code: str, value: int) -> int:
    """Run the program, always supplying value, and return its last output."""
    io = Bus(ConstInput(value), Last())
    system = CPU.parse(code).wrap(io)
    system.run()
    if io.output.value is None:
        raise ExpectedOutput()
    return io.output.value


def part1(text: str) -> int:
    return run_with_input(text, 1)


def part2(text: str) -> int:
    return run_with_input(text, 5)


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day05.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()