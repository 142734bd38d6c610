"""Shared types for Intcode machines: errors, step results and I/O wrapping."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class IntcodeError(Exception):
    """Base class for every failure raised while running an Intcode system."""


class BadParameterMode(IntcodeError):
    def __init__(self, mode: int) -> None:
        super().__init__(f"bad parameter mode {mode}")
        self.mode = mode


class BadOpCode(IntcodeError):
    def __init__(self, op_code: int) -> None:
        super().__init__(f"bad op code {op_code}")
        self.op_code = op_code


class WriteToImmediate(IntcodeError):
    def __init__(self) -> None:
        super().__init__("cannot write to an immediate-mode parameter")


class ParsingFailure(IntcodeError):
    """The program text could not be read as comma-separated integers."""


class LogicError(IntcodeError):
    """The machine or its surroundings behaved in an unexpected way."""


class ExpectedOutput(IntcodeError):
    def __init__(self) -> None:
        super().__init__("expected the program to produce output")


class InputFailure(IntcodeError):
    def __init__(self) -> None:
        super().__init__("input could not be delivered")


class Signal(Enum):
    """A step result that carries no value."""

    CONTINUE = "continue"
    HALTED = "halted"
    AWAITING_INPUT = "awaiting input"


@dataclass(frozen=True)
class Output:
    """A step result carrying a value produced by the machine."""

    value: Any


StepResult = Union[Signal, Output]


class Runnable(ABC):
    """Something that can be stepped, fed input and run to a stopping point."""

    @abstractmethod
    def accept_input(self, value: Any) -> None:
        """Hand one input value to the machine."""

    @abstractmethod
    def step(self) -> StepResult:
        """Advance by one step and report what happened."""

    def run(self) -> Signal:
        """Step until the machine halts or waits for input."""
        while True:
            state = self.step()
            if state is Signal.HALTED or state is Signal.AWAITING_INPUT:
                return state

    def run_until_output(self) -> Any:
        """Step until an output appears and return its value."""
        while True:
            state = self.step()
            if isinstance(state, Output):
                return state.value
            if state is Signal.HALTED or state is Signal.AWAITING_INPUT:
                raise ExpectedOutput()

    def wrap(self, io: Any) -> IOWrapper:
        """Surround this machine with an I/O device."""
        return IOWrapper(io, self)


class IOWrapper(Runnable):
    """A machine whose inputs and outputs pass through an outer device.

    The device supplies provide_input(), receive_input(value) and
    handle_output(value).
    """

    def __init__(self, outer: Any, inner: Runnable) -> None:
        self.outer = outer
        self.inner = inner

    def accept_input(self, value: Any) -> None:
        self.outer.receive_input(value)

    def step(self) -> StepResult:
        state = self.inner.step()
        if isinstance(state, Output):
            return self.outer.handle_output(state.value)
        if state is Signal.AWAITING_INPUT:
            new_state, value = self.outer.provide_input()
            if value is not None:
                self.inner.accept_input(value)
            return new_state
        return state

    def reset(self) -> None:
        self.outer.reset()
        self.inner.reset()