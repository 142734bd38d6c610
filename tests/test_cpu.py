import pytest

from aoc2019.intcode.core import (
    BadOpCode,
    BadParameterMode,
    InputFailure,
    Output,
    ParsingFailure,
    Signal,
    WriteToImmediate,
)
from aoc2019.intcode.cpu import CPU, Memory, parse_code
from aoc2019.intcode.devices import IOQueues

QUINE = "109,1,204,-1,1001,100,1,100,1008,100,16,101,1006,101,0,99"


def test_memory_reads_zero_past_end():
    memory = Memory([1, 2, 3])
    assert memory.get(2) == 3
    assert memory.get(50) == 0


def test_memory_grows_on_write_and_resets():
    memory = Memory([1, 2])
    memory.set(5, 7)
    assert memory.ram == [1, 2, 0, 0, 0, 7]
    memory.reset()
    assert memory.ram == [1, 2]


def test_memory_rejects_negative_write():
    with pytest.raises(IndexError):
        Memory([0]).set(-1, 4)


def test_parse_code_accepts_signs():
    assert parse_code("1,-2,+3") == [1, -2, 3]


@pytest.mark.parametrize("code", ["1,x", "1, 2", "1,,2", "1,2\n"])
def test_parse_code_rejects_bad_text(code):
    with pytest.raises(ParsingFailure):
        parse_code(code)


def test_add_and_multiply_example():
    cpu = CPU.parse("1,9,10,3,2,3,11,0,99,30,40,50")
    assert cpu.run() is Signal.HALTED
    assert cpu.memory.get(0) == 3500


def test_immediate_mode_multiply():
    cpu = CPU.parse("1002,4,3,4,33")
    cpu.run()
    assert cpu.memory.get(4) == 99


def test_quine_outputs_itself():
    system = CPU.parse(QUINE).wrap(IOQueues())
    system.run()
    assert list(system.outer.output) == parse_code(QUINE)


def test_large_output():
    assert CPU.parse("104,1125899906842624,99").run_until_output() == 1125899906842624


@pytest.mark.parametrize("value, expected", [(8, 1), (7, 0)])
def test_equal_comparison(value, expected):
    cpu = CPU.parse("3,9,8,9,10,9,4,9,99,-1,8")
    cpu.accept_input(value)
    assert cpu.run_until_output() == expected


def test_input_waits_then_stores():
    cpu = CPU.parse("3,0,99")
    assert cpu.run() is Signal.AWAITING_INPUT
    cpu.accept_input(5)
    assert cpu.run() is Signal.HALTED
    assert cpu.memory.get(0) == 5


def test_relative_mode_input():
    cpu = CPU.parse("109,5,203,0,99")
    cpu.accept_input(7)
    cpu.run()
    assert cpu.memory.get(5) == 7


def test_second_pending_input_fails():
    cpu = CPU.parse("99")
    cpu.accept_input(1)
    with pytest.raises(InputFailure):
        cpu.accept_input(2)


def test_bad_op_code():
    with pytest.raises(BadOpCode) as info:
        CPU.parse("98").step()
    assert info.value.op_code == 98


def test_negative_op_code():
    with pytest.raises(BadOpCode) as info:
        CPU.parse("-1").step()
    assert info.value.op_code == -1


def test_bad_parameter_mode():
    with pytest.raises(BadParameterMode) as info:
        CPU.parse("301,0,0,0,99").step()
    assert info.value.mode == 3


def test_write_to_immediate():
    with pytest.raises(WriteToImmediate):
        CPU.parse("11101,1,1,0,99").step()


def test_output_step_result():
    assert CPU.parse("4,0,99").step() == Output(4)


def test_reset_restores_state():
    cpu = CPU.parse("1,0,0,0,99")
    cpu.run()
    assert cpu.memory.get(0) == 2
    cpu.reset()
    assert cpu.memory.get(0) == 1
    assert (cpu.instr_ptr, cpu.rel_base, cpu.input) == (0, 0, None)