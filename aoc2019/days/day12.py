"""Simulating the motion of moons under pairwise gravity."""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import combinations, count
from typing import Sequence

from aoc2019.numtheory import lcm
from aoc2019.points import Point3D
from aoc2019.runner import load_input, run_parts

_MOON = re.compile(r"<x=[ \t]*(-?[0-9]+), y=[ \t]*(-?[0-9]+), z=[ \t]*(-?[0-9]+)>")

CoordState = tuple[tuple[int, int], ...]


@dataclass
class Moon:
    position: Point3D
    velocity: Point3D = Point3D(0, 0, 0)


@dataclass
class Space:
    moons: list[Moon]

    @classmethod
    def parse(cls, text: str) -> Space:
        """Read one <x=.., y=.., z=..> position per line; moons start at rest."""
        moons = []
        for line in text.split("\n"):
            match = _MOON.fullmatch(line)
            if match is None:
                raise ValueError(f"bad moon line: {line!r}")
            moons.append(Moon(Point3D(*(int(g) for g in match.groups()))))
        return cls(moons)

    def step(self) -> None:
        """Apply gravity to every velocity, then move every moon."""
        changes = [[0, 0, 0] for _ in self.moons]
        for i, j in combinations(range(len(self.moons)), 2):
            for axis in range(3):
                a = self.moons[i].position[axis]
                b = self.moons[j].position[axis]
                pull = (a < b) - (a > b)
                changes[i][axis] += pull
                changes[j][axis] -= pull
        for moon, change in zip(self.moons, changes):
            moon.velocity = moon.velocity + tuple(change)
        for moon in self.moons:
            moon.position = moon.position + moon.velocity

    def coord_states(self) -> list[CoordState]:
        """For each axis, every moon's (position, velocity) along it."""
        return [
            tuple((m.position[axis], m.velocity[axis]) for m in self.moons)
            for axis in range(3)
        ]

    def energy(self) -> int:
        return sum(m.position.l1_norm() * m.velocity.l1_norm() for m in self.moons)


def energy_after(text: str, steps: int) -> int:
    """Total energy of the system after the given number of steps."""
    space = Space.parse(text)
    for _ in range(steps):
        space.step()
    return space.energy()


def part1(text: str) -> int:
    return energy_after(text, 1000)


def part2(text: str) -> int:
    """Steps until the system first repeats a previous state."""
    space = Space.parse(text)
    seen: list[set[CoordState]] = [set(), set(), set()]
    cycles: list[int | None] = [None, None, None]
    for i in count():
        for dim, state in enumerate(space.coord_states()):
            if state in seen[dim]:
                if cycles[dim] is None:
                    cycles[dim] = i
            else:
                seen[dim].add(state)
        if all(c is not None for c in cycles):
            break
        space.step()
    t0, t1, t2 = cycles
    return lcm(lcm(t0, t1), t2)


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day12.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()