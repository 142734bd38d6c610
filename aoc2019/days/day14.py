"""Nanofactory reactions: ore needed for fuel, and fuel made from a trillion ore."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from typing import Mapping, Sequence

from aoc2019.runner import load_input, run_parts

ORE = "ORE"
ORE_SUPPLY = 1000000000000

_SUBSTANCE = re.compile(r"([0-9]+)[ \t]+([A-Za-z]+)")

Reaction = tuple[int, list["Substance"]]


@dataclass(frozen=True)
class Substance:
    amount: int
    kind: str


def _parse_substance(text: str) -> Substance:
    match = _SUBSTANCE.fullmatch(text)
    if match is None:
        raise ValueError(f"bad substance: {text!r}")
    return Substance(int(match.group(1)), match.group(2))


def _parse_reaction(line: str) -> tuple[str, Reaction]:
    inputs, sep, output = line.partition(" => ")
    if not sep:
        raise ValueError(f"bad reaction: {line!r}")
    produced = _parse_substance(output)
    return produced.kind, (produced.amount, [_parse_substance(s) for s in inputs.split(", ")])


class Science:
    """Reactions keyed by product, with products ordered before their inputs."""

    def __init__(self, reactions: Mapping[str, Reaction]) -> None:
        self.reactions = dict(reactions)
        pending = {
            kind: {s.kind for s in inputs} for kind, (_, inputs) in self.reactions.items()
        }
        order: list[str] = []
        queue = deque([ORE])
        while queue:
            substance = queue.popleft()
            order.append(substance)
            for kind, needs in pending.items():
                if substance in needs:
                    needs.discard(substance)
                    if not needs:
                        queue.append(kind)
        order.reverse()
        self.order = order
        self.indices = {substance: i for i, substance in enumerate(order)}

    @classmethod
    def parse(cls, text: str) -> Science:
        """Read one reaction per line, e.g. '7 A, 1 B => 1 C'."""
        return cls(dict(_parse_reaction(line) for line in text.split("\n")))

    def ore_for_fuel(self, amount: int) -> int:
        """Ore needed to produce the given amount of the first product (FUEL)."""
        amounts = [0] * len(self.order)
        amounts[0] = amount
        last = len(amounts) - 1
        while True:
            i = next((i for i, a in enumerate(amounts) if a > 0), None)
            if i is None:
                raise ValueError("nothing left to produce")
            if i == last:
                break
            per_reaction, inputs = self.reactions[self.order[i]]
            runs = -(-amounts[i] // per_reaction)
            for substance in inputs:
                amounts[self.indices[substance.kind]] += runs * substance.amount
            amounts[i] = 0
        return amounts[last]


def part1(text: str) -> int:
    return Science.parse(text).ore_for_fuel(1)


def part2(text: str) -> int:
    """Most fuel that the ore supply can produce."""
    science = Science.parse(text)
    low = science.ore_for_fuel(1)
    high = ORE_SUPPLY
    while low < high:
        mid = low + (high - low) // 2
        ore_for_mid = science.ore_for_fuel(mid)
        if ore_for_mid <= ORE_SUPPLY and science.ore_for_fuel(mid + 1) > ORE_SUPPLY:
            low = high = mid
        elif ore_for_mid <= ORE_SUPPLY:
            low = mid + 1
        else:
            high = mid - 1
    return low


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day14.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()