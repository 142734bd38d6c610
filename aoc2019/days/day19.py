"""Surveying a tractor beam with a drone program."""

from __future__ import annotations

from itertools import product
from typing import Sequence

from aoc2019.intcode.core import ExpectedOutput, IOWrapper
from aoc2019.intcode.cpu import CPU
from aoc2019.intcode.devices import IOQueues
from aoc2019.runner import load_input, run_parts

SHIP_SIZE = 100


def get_reading(system: IOWrapper, x: int, y: int) -> int:
    """Restart the drone program and report whether (x, y) is in the beam."""
    system.reset()
    system.outer.input.extend([x, y])
    system.run()
    if not system.outer.output:
        raise ExpectedOutput()
    return system.outer.output.popleft()


def _system(text: str) -> IOWrapper:
    return CPU.parse(text).wrap(IOQueues())


def part1(text: str) -> int:
    system = _system(text)
    return sum(get_reading(system, x, y) for x, y in product(range(50), repeat=2))


def part2(text: str) -> int:
    """Top-left corner code, 10000 * x + y, of the first square that fits the ship."""
    system = _system(text)
    reach = SHIP_SIZE - 1
    x, y = 0, SHIP_SIZE
    while True:
        while get_reading(system, x, y) == 0:
            x += 1
        if get_reading(system, x + reach, y - reach) == 1:
            return 10000 * x + y - reach
        y += 1


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day19.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()