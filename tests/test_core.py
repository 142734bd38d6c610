from collections import deque

import pytest

from aoc2019.intcode.core import (
    ExpectedOutput,
    IntcodeError,
    IOWrapper,
    Output,
    Signal,
)
from aoc2019.intcode.cpu import CPU
from aoc2019.intcode.devices import IOQueues


def test_run_stops_at_halt():
    assert CPU.parse("99").run() is Signal.HALTED


def test_run_stops_when_waiting_for_input():
    assert CPU.parse("3,0,99").run() is Signal.AWAITING_INPUT


def test_run_until_output_returns_value():
    assert CPU.parse("104,5,99").run_until_output() == 5


def test_run_until_output_raises_on_halt():
    with pytest.raises(ExpectedOutput):
        CPU.parse("99").run_until_output()


def test_run_until_output_raises_when_waiting():
    with pytest.raises(ExpectedOutput):
        CPU.parse("3,0,4,0,99").run_until_output()


def test_wrap_returns_io_wrapper_around_machine():
    cpu = CPU.parse("99")
    io = IOQueues()
    system = cpu.wrap(io)
    assert isinstance(system, IOWrapper)
    assert system.inner is cpu and system.outer is io


def test_wrapper_feeds_input_and_collects_output():
    system = CPU.parse("3,0,4,0,99").wrap(IOQueues())
    system.accept_input(42)
    assert system.run() is Signal.HALTED
    assert system.outer.output == deque([42])


def test_wrapper_step_passes_output_through_device():
    system = CPU.parse("104,9,99").wrap(IOQueues())
    assert system.step() == Output(9)


def test_wrapper_waits_when_device_has_no_input():
    system = CPU.parse("3,0,99").wrap(IOQueues())
    assert system.run() is Signal.AWAITING_INPUT
    system.accept_input(1)
    assert system.run() is Signal.HALTED


def test_wrapper_reset_clears_both_sides():
    system = CPU.parse("3,0,4,0,99").wrap(IOQueues())
    system.accept_input(8)
    system.run()
    system.reset()
    assert system.outer.output == deque()
    assert system.inner.memory.get(0) == 3
    assert system.inner.instr_ptr == 0


def test_parse_error_is_an_intcode_error():
    with pytest.raises(IntcodeError):
        CPU.parse("1,x,3")


def test_missing_output_is_an_intcode_error():
    with pytest.raises(IntcodeError):
        CPU.parse("99").run_until_output()