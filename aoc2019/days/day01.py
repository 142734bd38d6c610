"""Fuel requirements for spacecraft modules."""

from __future__ import annotations

from typing import Sequence

from aoc2019.runner import load_input, run_parts


def _masses(text: str) -> list[int]:
    return [int(line) for line in text.splitlines()]


def total_fuel(mass: int) -> int:
    """Fuel for a mass, counting the fuel needed to carry the fuel."""
    total = 0
    while mass >= 9:
        mass = mass // 3 - 2
        total += mass
    return total


def part1(text: str) -> int:
    return sum(mass // 3 - 2 for mass in _masses(text))


def part2(text: str) -> int:
    return sum(total_fuel(mass) for mass in _masses(text))


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day01.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()