"""The Intcode processor and its memory."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Iterable

from aoc2019.intcode.core import (
    BadOpCode,
    BadParameterMode,
    InputFailure,
    Output,
    ParsingFailure,
    Runnable,
    Signal,
    StepResult,
    WriteToImmediate,
)

_NUMBER = re.compile(r"[+-]?[0-9]+")


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


class Memory:
    """Program memory that grows on write and reads zero beyond its end."""

    def __init__(self, rom: Iterable[int]) -> None:
        self.rom = tuple(rom)
        self.ram = list(self.rom)

    def get(self, address: int) -> int:
        if address < 0 or address >= len(self.ram):
            return 0
        return self.ram[address]

    def set(self, address: int, value: int) -> None:
        if address < 0:
            raise IndexError(f"negative memory address {address}")
        if address >= len(self.ram):
            self.ram.extend([0] * (address + 1 - len(self.ram)))
        self.ram[address] = value

    def reset(self) -> None:
        """Restore the original program."""
        self.ram = list(self.rom)


def parse_code(code: str) -> list[int]:
    """Read a comma-separated list of integers."""
    values = []
    for part in code.split(","):
        if not _NUMBER.fullmatch(part):
            raise ParsingFailure(f"invalid digit found in {part!r}")
        values.append(int(part))
    return values


class _Mode(IntEnum):
    POSITION = 0
    IMMEDIATE = 1
    RELATIVE = 2


class _Op(IntEnum):
    ADD = 1
    MULTIPLY = 2
    INPUT = 3
    OUTPUT = 4
    JUMP_IF_TRUE = 5
    JUMP_IF_FALSE = 6
    LESS_THAN = 7
    EQUAL = 8
    RELATIVE_BASE_OFFSET = 9
    DONE = 99


_ARITY = {
    _Op.ADD: 3,
    _Op.MULTIPLY: 3,
    _Op.INPUT: 1,
    _Op.OUTPUT: 1,
    _Op.JUMP_IF_TRUE: 2,
    _Op.JUMP_IF_FALSE: 2,
    _Op.LESS_THAN: 3,
    _Op.EQUAL: 3,
    _Op.RELATIVE_BASE_OFFSET: 1,
    _Op.DONE: 0,
}

_Param = tuple[_Mode, int]


class CPU(Runnable):
    """An Intcode processor holding at most one pending input value."""

    def __init__(self, program: Iterable[int]) -> None:
        self.memory = Memory(program)
        self.instr_ptr = 0
        self.rel_base = 0
        self.input: int | None = None

    @classmethod
    def parse(cls, code: str) -> CPU:
        return cls(parse_code(code))

    def _param(self, instr: int, i: int) -> _Param:
        value = self.memory.get(self.instr_ptr + i)
        mode = _trunc_mod(_trunc_div(instr, 10 ** (i + 1)), 10)
        try:
            return _Mode(mode), value
        except ValueError:
            raise BadParameterMode(mode) from None

    def _decode(self) -> tuple[_Op, list[_Param]]:
        instr = self.memory.get(self.instr_ptr)
        code = _trunc_mod(instr, 100)
        try:
            op = _Op(code)
        except ValueError:
            raise BadOpCode(code) from None
        return op, [self._param(instr, i) for i in range(1, _ARITY[op] + 1)]

    def _read(self, param: _Param) -> int:
        mode, value = param
        if mode is _Mode.POSITION:
            return self.memory.get(value)
        if mode is _Mode.IMMEDIATE:
            return value
        return self.memory.get(self.rel_base + value)

    def _write(self, param: _Param, value: int) -> None:
        mode, target = param
        if mode is _Mode.IMMEDIATE:
            raise WriteToImmediate()
        address = target if mode is _Mode.POSITION else self.rel_base + target
        self.memory.set(address, value)

    def accept_input(self, value: int) -> None:
        if self.input is not None:
            raise InputFailure()
        self.input = value

    def step(self) -> StepResult:
        op, params = self._decode()
        match op:
            case _Op.ADD | _Op.MULTIPLY | _Op.LESS_THAN | _Op.EQUAL:
                a, b = self._read(params[0]), self._read(params[1])
                if op is _Op.ADD:
                    result = a + b
                elif op is _Op.MULTIPLY:
                    result = a * b
                elif op is _Op.LESS_THAN:
                    result = int(a < b)
                else:
                    result = int(a == b)
                self._write(params[2], result)
                self.instr_ptr += 4
            case _Op.INPUT:
                if self.input is None:
                    return Signal.AWAITING_INPUT
                value, self.input = self.input, None
                self._write(params[0], value)
                self.instr_ptr += 2
            case _Op.OUTPUT:
                value = self._read(params[0])
                self.instr_ptr += 2
                return Output(value)
            case _Op.JUMP_IF_TRUE | _Op.JUMP_IF_FALSE:
                condition = self._read(params[0]) != 0
                if condition == (op is _Op.JUMP_IF_TRUE):
                    self.instr_ptr = self._read(params[1])
                else:
                    self.instr_ptr += 3
            case _Op.RELATIVE_BASE_OFFSET:
                self.rel_base += self._read(params[0])
                self.instr_ptr += 2
            case _Op.DONE:
                return Signal.HALTED
        return Signal.CONTINUE

    def reset(self) -> None:
        self.memory.reset()
        self.instr_ptr = 0
        self.rel_base = 0
        self.input = None