"""Running the BOOST program, which must print exactly one value."""

from __future__ import annotations

from typing import Sequence

from aoc2019.intcode.core import ExpectedOutput, LogicError, Signal
from aoc2019.intcode.cpu import CPU
from aoc2019.runner import load_input, run_parts


class SingleOutputIO:
    """Supplies a constant input and accepts exactly one output."""

    def __init__(self, const_input: int) -> None:
        self.const_input = const_input
        self.output: int | None = None

    def provide_input(self) -> tuple[Signal, int]:
        return Signal.CONTINUE, self.const_input

    def receive_input(self, value: int) -> None:
        raise LogicError(f"Didn't expect to receive any input; received {value}")

    def handle_output(self, value: int) -> Signal:
        if self.output is not None:
            raise LogicError(f"Expected only one output; got {self.output} and {value}")
        self.output = value
        return Signal.CONTINUE


def _run(text: str, mode: int) -> int:
    io = SingleOutputIO(mode)
    CPU.parse(text).wrap(io).run()
    if io.output is None:
        raise ExpectedOutput()
    return io.output


def part1(text: str) -> int:
    return _run(text, 1)


def part2(text: str) -> int:
    return _run(text, 2)


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day09.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()