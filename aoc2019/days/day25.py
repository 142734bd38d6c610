"""Playing the text adventure on the ship through the console."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Sequence, TextIO

from aoc2019.intcode.core import InputFailure, Output, Signal, StepResult
from aoc2019.intcode.cpu import CPU
from aoc2019.runner import load_input, run_parts


@dataclass
class Chunker:
    """Turns whole strings into character codes, and output codes into lines."""

    input: deque = field(default_factory=deque)
    output: deque = field(default_factory=deque)

    def provide_input(self) -> tuple[Signal, int | None]:
        if self.input:
            return Signal.CONTINUE, ord(self.input.popleft())
        return Signal.AWAITING_INPUT, None

    def receive_input(self, value: str) -> None:
        self.input.extend(value)

    def handle_output(self, value: int) -> StepResult:
        char = chr(value & 0xFF)
        self.output.append(char)
        if char == "\n":
            line = "".join(self.output)
            self.output.clear()
            return Output(line)
        return Signal.CONTINUE


class Console:
    """Reads commands line by line and prints the game's text."""

    def __init__(
        self, input_stream: TextIO | None = None, output_stream: TextIO | None = None
    ) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout

    def provide_input(self) -> tuple[Signal, str]:
        try:
            line = self.input_stream.readline()
        except OSError:
            raise InputFailure() from None
        if not line:
            raise InputFailure()
        return Signal.CONTINUE, line

    def receive_input(self, value: object) -> None:
        raise InputFailure()

    def handle_output(self, value: str) -> Signal:
        self.output_stream.write(value)
        self.output_stream.flush()
        return Signal.CONTINUE


def part1(text: str) -> str:
    """Play interactively on standard input and output until the program halts."""
    CPU.parse(text).wrap(Chunker()).wrap(Console()).run()
    return "Done"


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day25.txt", argv), [("Part 1", part1)])


if __name__ == "__main__":
    main()