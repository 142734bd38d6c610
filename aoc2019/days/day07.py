"""Chaining amplifier programs in series and in a feedback loop."""

from __future__ import annotations

from itertools import permutations
from typing import Iterable, Sequence

from aoc2019.intcode.core import IOWrapper, LogicError, Signal
from aoc2019.intcode.cpu import CPU, parse_code
from aoc2019.intcode.devices import IOQueues
from aoc2019.runner import load_input, run_parts


def init_thrusters(program: Sequence[int], phases: Iterable[int]) -> list[IOWrapper]:
    """One queued amplifier per phase setting, each already given its phase."""
    systems = []
    for phase in phases:
        system = CPU(program).wrap(IOQueues())
        system.accept_input(phase)
        systems.append(system)
    return systems


def _series_signal(program: Sequence[int], phases: Sequence[int]) -> int:
    systems = init_thrusters(program, phases)
    systems[0].accept_input(0)
    for i, (current, following) in enumerate(zip(systems, systems[1:])):
        current.run_until_output()
        if not current.outer.output:
            raise LogicError(f"Expected an output for intcode {i}")
        following.accept_input(current.outer.output.popleft())
    last = systems[-1]
    last.run_until_output()
    if not last.outer.output:
        raise LogicError("Expected an output")
    return last.outer.output.popleft()


def _feedback_signal(program: Sequence[int], phases: Sequence[int]) -> int:
    systems = init_thrusters(program, phases)
    systems[0].accept_input(0)
    final = len(systems) - 1
    last = 0
    while True:
        states = [system.step() for system in systems]
        if all(state is Signal.HALTED for state in states):
            return last
        for i, system in enumerate(systems):
            target = systems[(i + 1) % len(systems)]
            while system.outer.output:
                value = system.outer.output.popleft()
                target.accept_input(value)
                if i == final:
                    last = value


def part1(text: str) -> int:
    """Highest signal from five amplifiers in series, phases 0 to 4."""
    program = parse_code(text)
    return max(_series_signal(program, phases) for phases in permutations(range(5)))


def part2(text: str) -> int:
    """Highest signal from five amplifiers in a feedback loop, phases 5 to 9."""
    program = parse_code(text)
    return max(
        _feedback_signal(program, phases) for phases in permutations(range(5, 10))
    )


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day07.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()