import pytest

from aoc2019.days.day09 import SingleOutputIO, part1, part2
from aoc2019.intcode.core import ExpectedOutput, LogicError, Signal

QUINE = "109,1,204,-1,1001,100,1,100,1008,100,16,101,1006,101,0,99"


def test_large_number():
    assert part1("104,1125899906842624,99") == 1125899906842624


def test_parts_supply_their_modes():
    assert part1("3,0,4,0,99") == 1
    assert part2("3,0,4,0,99") == 2


def test_more_than_one_output_is_an_error():
    with pytest.raises(LogicError):
        part1(QUINE)


def test_no_output_is_an_error():
    with pytest.raises(ExpectedOutput):
        part2("99")


def test_device_rejects_received_input():
    io = SingleOutputIO(1)
    assert io.provide_input() == (Signal.CONTINUE, 1)
    with pytest.raises(LogicError):
        io.receive_input(3)


def test_device_keeps_single_output():
    io = SingleOutputIO(0)
    assert io.handle_output(6) is Signal.CONTINUE
    assert io.output == 6
    with pytest.raises(LogicError):
        io.handle_output(7)