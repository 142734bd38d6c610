"""Scaffold intersections and a movement program for the vacuum robot."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, replace
from enum import Enum
from itertools import groupby
from typing import Sequence

from aoc2019.grid import Direction, Position
from aoc2019.intcode.core import ExpectedOutput, IOWrapper, LogicError, Signal
from aoc2019.intcode.cpu import CPU
from aoc2019.intcode.devices import Bus, CharQueue, Last
from aoc2019.runner import load_input, run_parts

MAX_ROUTINE_LENGTH = 10
ROUTINE_NAMES = "ABC"

_SCAFFOLD = "#"
_ROBOT_DIRECTIONS = {
    "^": Direction.UP,
    ">": Direction.RIGHT,
    "v": Direction.DOWN,
    "<": Direction.LEFT,
}


class Step(Enum):
    """A single move of the robot."""

    FORWARD = "forward"
    TURN_LEFT = "L"
    TURN_RIGHT = "R"


@dataclass(frozen=True)
class Command:
    """A turn, or a run of forward moves of the given distance."""

    step: Step
    distance: int = 0

    def __str__(self) -> str:
        if self.step is Step.FORWARD:
            return str(self.distance)
        return self.step.value


Routine = tuple[Command, ...]


@dataclass(frozen=True)
class Routines:
    """A main program over routines A, B and C, and the commands not yet covered."""

    a: Routine | None = None
    b: Routine | None = None
    c: Routine | None = None
    program: tuple[str, ...] = ()
    remaining: Routine = ()

    def routine(self, name: str) -> Routine | None:
        return {"A": self.a, "B": self.b, "C": self.c}[name]


@dataclass
class Scene:
    """The scaffolding and where the robot stands and faces."""

    scaffolds: set[Position]
    robot_pos: Position
    robot_dir: Direction

    def neighbors(self, position: Position) -> list[Position]:
        """Scaffold cells next to position, in the order up, left, down, right."""
        row, col = position
        candidates = []
        if row > 0:
            candidates.append(Position(row - 1, col))
        if col > 0:
            candidates.append(Position(row, col - 1))
        candidates.append(Position(row + 1, col))
        candidates.append(Position(row, col + 1))
        return [p for p in candidates if p in self.scaffolds]

    def intersections(self) -> list[Position]:
        """Scaffold cells where more than two scaffold lines meet, sorted."""
        return sorted(p for p in self.scaffolds if len(self.neighbors(p)) > 2)

    def _ahead(self, position: Position, direction: Direction) -> Position | None:
        following = position.step(direction)
        if following is not None and following in self.scaffolds:
            return following
        return None

    def steps(self) -> list[Step]:
        """Moves that follow the scaffold to its end, going straight at crossings."""
        result: list[Step] = []
        position, direction = self.robot_pos, self.robot_dir
        while True:
            following = self._ahead(position, direction)
            if following is not None:
                result.append(Step.FORWARD)
                position = following
                continue
            turns = (
                (Step.TURN_LEFT, direction.counterclockwise()),
                (Step.TURN_RIGHT, direction.clockwise()),
            )
            for step, turned in turns:
                if self._ahead(position, turned) is not None:
                    result.append(step)
                    direction = turned
                    break
            else:
                return result

    def commands(self) -> list[Command]:
        """The steps with runs of forward moves merged."""
        result: list[Command] = []
        for step, group in groupby(self.steps()):
            run = len(list(group))
            if step is Step.FORWARD:
                result.append(Command(step, run))
            else:
                result.extend(Command(step) for _ in range(run))
        return result

    def programs(self) -> Routines:
        """Split the commands into at most three routines with the shortest main program."""
        queue = deque([Routines(remaining=tuple(self.commands()))])
        while queue:
            state = queue.popleft()
            if not state.remaining:
                return state
            for name in ROUTINE_NAMES:
                routine = state.routine(name)
                if routine is not None and state.remaining[: len(routine)] == routine:
                    queue.append(
                        replace(
                            state,
                            program=state.program + (name,),
                            remaining=state.remaining[len(routine):],
                        )
                    )
            undefined = next(
                (name for name in ROUTINE_NAMES if state.routine(name) is None), None
            )
            if undefined is None:
                continue
            for length in range(1, min(MAX_ROUTINE_LENGTH + 1, len(state.remaining))):
                queue.append(
                    replace(
                        state,
                        program=state.program + (undefined,),
                        remaining=state.remaining[length:],
                        **{undefined.lower(): state.remaining[:length]},
                    )
                )
        raise LogicError("No way to split the path into routines")


class SceneBuilder:
    """Reads the camera picture, one character per output, into a Scene."""

    def __init__(self) -> None:
        self.row = 0
        self.col = 0
        self.scaffolds: set[Position] = set()
        self.robot_pos: Position | None = None
        self.robot_dir: Direction | None = None

    def build(self) -> Scene:
        if self.robot_pos is None:
            raise LogicError("Expected robot position")
        if self.robot_dir is None:
            raise LogicError("Expected robot direction")
        return Scene(self.scaffolds, self.robot_pos, self.robot_dir)

    def provide_input(self) -> tuple[Signal, int | None]:
        raise LogicError("Didn't expect to be asked for any input")

    def receive_input(self, value: object) -> None:
        raise LogicError(f"Didn't expect to receive input; got {value!r}")

    def handle_output(self, value: int) -> Signal:
        char = chr(value & 0xFF)
        position = Position(self.row, self.col)
        if char == _SCAFFOLD or char in _ROBOT_DIRECTIONS:
            self.scaffolds.add(position)
        if char in _ROBOT_DIRECTIONS:
            self.robot_pos = position
            self.robot_dir = _ROBOT_DIRECTIONS[char]
        if char == "\n":
            self.row += 1
            self.col = 0
        else:
            self.col += 1
        return Signal.CONTINUE


def parse_scene(text: str) -> Scene:
    """Build a scene from a picture drawn as text."""
    builder = SceneBuilder()
    for char in text:
        builder.handle_output(ord(char))
    return builder.build()


def encode_routines(routines: Routines) -> str:
    """The movement input for the robot: main program, three routines, no video."""
    lines = [",".join(routines.program)]
    for name in ROUTINE_NAMES:
        routine = routines.routine(name)
        if routine is None:
            raise LogicError(f"Routine {name} is not defined")
        lines.append(",".join(str(command) for command in routine))
    lines.append("n")
    return "\n".join(lines) + "\n"


def _scan(text: str) -> Scene:
    builder = SceneBuilder()
    IOWrapper(builder, CPU.parse(text)).run()
    return builder.build()


def part1(text: str) -> int:
    """Sum of row times column over all scaffold intersections."""
    return sum(p.row * p.col for p in _scan(text).intersections())


def part2(text: str) -> int:
    """Dust collected after walking the robot over the whole scaffold."""
    script = encode_routines(_scan(text).programs())
    output = Last()
    cpu = CPU.parse(text)
    cpu.memory.set(0, 2)
    IOWrapper(Bus(CharQueue(script), output), cpu).run()
    if output.value is None:
        raise ExpectedOutput()
    return output.value


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day17.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()