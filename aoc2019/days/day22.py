"""Slam shuffling a deck of space cards, as linear maps modulo the deck size."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import Iterable, Sequence

from aoc2019.numtheory import inverse_mod
from aoc2019.runner import load_input, run_parts

SMALL_DECK = 10007
LARGE_DECK = 119315717514047
SHUFFLE_COUNT = 101741582076661

_INCREMENT = re.compile(r"deal with increment (-?[0-9]+)")
_CUT = re.compile(r"cut (-?[0-9]+)")


@dataclass(frozen=True)
class Polymod:
    """The map x -> a0 + a1 * x modulo n."""

    a0: int
    a1: int
    n: int

    def apply(self, x: int) -> int:
        return (self.a1 * x + self.a0) % self.n

    def compose(self, other: Polymod) -> Polymod:
        """The map that applies self first and then other."""
        if self.n != other.n:
            raise ValueError("cannot compose maps with different moduli")
        n = self.n
        return Polymod((other.a1 * self.a0 + other.a0) % n, (self.a1 * other.a1) % n, n)

    def repeat(self, k: int) -> Polymod:
        """This map applied k times."""
        result = Polymod(0, 1, self.n)
        power = self
        while k > 0:
            if k % 2 == 1:
                result = result.compose(power)
            power = power.compose(power)
            k //= 2
        return result

    def invert(self) -> Polymod:
        a1_inv = inverse_mod(self.a1, self.n)
        return Polymod((-a1_inv * self.a0) % self.n, a1_inv % self.n, self.n)


@dataclass(frozen=True)
class Instruction:
    """One shuffling technique; amount is unused for a new stack."""

    class Kind(Enum):
        NEW_STACK = "deal into new stack"
        INCREMENT = "deal with increment"
        CUT = "cut"

    kind: Instruction.Kind
    amount: int = 0

    def to_polymod(self, n: int) -> Polymod:
        """Where a card's position moves to under this technique."""
        if self.kind is Instruction.Kind.NEW_STACK:
            return Polymod(-1 % n, -1 % n, n)
        if self.kind is Instruction.Kind.INCREMENT:
            return Polymod(0, self.amount % n, n)
        return Polymod(-self.amount % n, 1, n)


def _parse_line(line: str) -> Instruction:
    if line == Instruction.Kind.NEW_STACK.value:
        return Instruction(Instruction.Kind.NEW_STACK)
    if match := _INCREMENT.fullmatch(line):
        return Instruction(Instruction.Kind.INCREMENT, int(match.group(1)))
    if match := _CUT.fullmatch(line):
        return Instruction(Instruction.Kind.CUT, int(match.group(1)))
    raise ValueError(f"unknown technique: {line!r}")


def parse_instructions(text: str) -> list[Instruction]:
    return [_parse_line(line) for line in text.splitlines()]


def shuffle_polymod(instructions: Iterable[Instruction], n: int) -> Polymod:
    """The whole shuffle as one map of positions in a deck of n cards."""
    return reduce(
        lambda current, instr: current.compose(instr.to_polymod(n)),
        instructions,
        Polymod(0, 1, n),
    )


def part1(text: str) -> int:
    """Position of card 2019 after one shuffle of the small deck."""
    return shuffle_polymod(parse_instructions(text), SMALL_DECK).apply(2019)


def part2(text: str) -> int:
    """Card ending at position 2020 after many shuffles of the large deck."""
    full = shuffle_polymod(parse_instructions(text), LARGE_DECK)
    return full.repeat(SHUFFLE_COUNT).invert().apply(2020) % LARGE_DECK


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day22.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()