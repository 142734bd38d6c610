"""An arcade cabinet running a block-breaking game."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from aoc2019.intcode.core import LogicError, Signal
from aoc2019.intcode.cpu import CPU
from aoc2019.points import Point2D
from aoc2019.runner import load_input, run_parts

SCORE_POSITION = (-1, 0)


class GameObject(IntEnum):
    EMPTY = 0
    WALL = 1
    BLOCK = 2
    HORIZONTAL_PADDLE = 3
    BALL = 4


class ArcadeCabinet:
    """Draws tiles from output triples and steers the paddle towards the ball."""

    def __init__(self) -> None:
        self.screen: dict[Point2D, GameObject] = {}
        self.score = 0
        self.ball = Point2D(0, 0)
        self.paddle = Point2D(0, 0)
        self.output_cache: list[int] = []

    def provide_input(self) -> tuple[Signal, int]:
        diff = self.ball.x - self.paddle.x
        return Signal.CONTINUE, (diff > 0) - (diff < 0)

    def receive_input(self, value: int) -> None:
        raise LogicError(f"Didn't expect to receive any input; received {value}")

    def handle_output(self, value: int) -> Signal:
        self.output_cache.append(value)
        if len(self.output_cache) == 3:
            x, y, z = self.output_cache
            self.output_cache.clear()
            if (x, y) == SCORE_POSITION:
                self.score = z
            else:
                try:
                    obj = GameObject(z)
                except ValueError:
                    raise LogicError(f"Invalid object code {z}") from None
                point = Point2D(x, y)
                if obj is GameObject.BALL:
                    self.ball = point
                if obj is GameObject.HORIZONTAL_PADDLE:
                    self.paddle = point
                self.screen[point] = obj
        return Signal.CONTINUE


def part1(text: str) -> int:
    """Number of block tiles on screen when the game stops."""
    cabinet = ArcadeCabinet()
    CPU.parse(text).wrap(cabinet).run()
    return sum(1 for obj in cabinet.screen.values() if obj is GameObject.BLOCK)


def part2(text: str) -> int:
    """Final score after playing with free credits."""
    cabinet = ArcadeCabinet()
    cpu = CPU.parse(text)
    cpu.memory.set(0, 2)
    cpu.wrap(cabinet).run()
    return cabinet.score


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day13.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()