"""Crossed wires on a plane."""

from __future__ import annotations

import re
from typing import Sequence

from aoc2019.points import Direction2D, Point2D
from aoc2019.runner import load_input, run_parts

Wire = list[tuple[Direction2D, int]]

_TERM = re.compile(r"([RLDU])(-?[0-9]+)")


def _parse_wire(line: str) -> Wire:
    steps = []
    for term in line.split(","):
        match = _TERM.fullmatch(term)
        if match is None:
            raise ValueError(f"bad wire segment: {term!r}")
        steps.append((Direction2D(match.group(1)), int(match.group(2))))
    return steps


def parse_input(text: str) -> tuple[Wire, Wire]:
    """Parse exactly two comma-separated wires on consecutive lines."""
    first, sep, second = text.partition("\n")
    if not sep:
        raise ValueError("expected two wires on separate lines")
    return _parse_wire(first), _parse_wire(second)


def trace_path(steps: Wire) -> dict[Point2D, int]:
    """Map each point the wire reaches to the step count of its first visit."""
    current = Point2D(0, 0)
    seen = {current: 0}
    count = 0
    for direction, length in steps:
        delta = direction.to_step()
        for _ in range(length):
            current += delta
            count += 1
            seen.setdefault(current, count)
    return seen


def _paths(text: str) -> tuple[dict[Point2D, int], dict[Point2D, int]]:
    a, b = parse_input(text)
    return trace_path(a), trace_path(b)


def part1(text: str) -> int:
    path_a, path_b = _paths(text)
    return min(p.l1_norm() for p in path_a.keys() & path_b.keys() if p.l1_norm() > 0)


def part2(text: str) -> int:
    path_a, path_b = _paths(text)
    return min(
        path_a[p] + path_b[p] for p in path_a.keys() & path_b.keys() if p.l1_norm() > 0
    )


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day03.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()