"""Ready-made input and output devices for Intcode machines."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any

from aoc2019.intcode.core import LogicError, Output, Signal, StepResult


@dataclass
class Bus:
    """Joins one device for input with another for output."""

    input: Any
    output: Any

    def provide_input(self) -> tuple[Signal, Any]:
        return self.input.provide_input()

    def receive_input(self, value: Any) -> None:
        self.input.receive_input(value)

    def handle_output(self, value: Any) -> StepResult:
        return self.output.handle_output(value)

    def reset(self) -> None:
        self.input.reset()
        self.output.reset()


@dataclass
class IOQueues:
    """Queues of pending inputs and collected outputs; outputs pass through."""

    input: deque = field(default_factory=deque)
    output: deque = field(default_factory=deque)

    def provide_input(self) -> tuple[Signal, int | None]:
        if self.input:
            return Signal.CONTINUE, self.input.popleft()
        return Signal.AWAITING_INPUT, None

    def receive_input(self, value: int) -> None:
        self.input.append(value)

    def handle_output(self, value: int) -> StepResult:
        self.output.append(value)
        return Output(value)

    def reset(self) -> None:
        self.input.clear()
        self.output.clear()


@dataclass
class ConstInput:
    """Answers every request for input with the same value."""

    value: Any

    def provide_input(self) -> tuple[Signal, Any]:
        return Signal.CONTINUE, self.value

    def receive_input(self, value: Any) -> None:
        raise LogicError("Does not accept input")


@dataclass
class Last:
    """Keeps only the most recent output."""

    value: Any = None

    def handle_output(self, value: Any) -> StepResult:
        self.value = value
        return Signal.CONTINUE


class IntQueue(deque):
    """A queue of integers usable both as input source and output sink."""

    def provide_input(self) -> tuple[Signal, int | None]:
        if self:
            return Signal.CONTINUE, self.popleft()
        return Signal.AWAITING_INPUT, None

    def receive_input(self, value: int) -> None:
        self.append(value)

    def handle_output(self, value: int) -> StepResult:
        self.append(value)
        return Signal.CONTINUE

    def reset(self) -> None:
        self.clear()


class CharQueue(deque):
    """A queue of characters delivered to the machine as their code points."""

    def provide_input(self) -> tuple[Signal, int | None]:
        if self:
            return Signal.CONTINUE, ord(self.popleft())
        return Signal.AWAITING_INPUT, None

    def receive_input(self, value: str) -> None:
        self.append(value)

    def reset(self) -> None:
        self.clear()