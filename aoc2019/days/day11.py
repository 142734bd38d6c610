"""A hull-painting robot driven by an Intcode brain."""

from __future__ import annotations

from typing import Sequence

from aoc2019.intcode.core import LogicError, Signal
from aoc2019.intcode.cpu import CPU
from aoc2019.points import Point2D
from aoc2019.runner import load_input, run_parts


class Robot:
    """Reports panel colours and follows paint-and-turn instructions."""

    def __init__(self) -> None:
        self.position = Point2D(0, 0)
        self.direction = Point2D(0, 1)
        self.is_white: set[Point2D] = set()
        self.visited = {self.position}
        self.awaiting_color = True

    def provide_input(self) -> tuple[Signal, int]:
        return Signal.CONTINUE, 1 if self.position in self.is_white else 0

    def receive_input(self, value: int) -> None:
        raise LogicError(f"Didn't expect to receive any input; received {value}")

    def handle_output(self, value: int) -> Signal:
        if self.awaiting_color:
            if value == 1:
                self.is_white.add(self.position)
            else:
                self.is_white.discard(self.position)
            self.awaiting_color = False
        else:
            x, y = self.direction
            self.direction = Point2D(-y, x) if value == 0 else Point2D(y, -x)
            self.position = self.position + self.direction
            self.visited.add(self.position)
            self.awaiting_color = True
        return Signal.CONTINUE


def _paint(text: str, robot: Robot) -> Robot:
    CPU.parse(text).wrap(robot).run()
    return robot


def part1(text: str) -> int:
    """Number of panels the robot reaches."""
    return len(_paint(text, Robot()).visited)


def part2(text: str) -> str:
    """The white panels drawn as '#' on '.', starting from a white panel."""
    robot = Robot()
    robot.is_white.add(Point2D(0, 0))
    white = _paint(text, robot).is_white
    if not white:
        raise ValueError("no panels are painted white")
    x_min = min(p.x for p in white)
    x_max = max(p.x for p in white)
    y_min = min(p.y for p in white)
    y_max = max(p.y for p in white)
    rows = [["."] * (x_max - x_min + 1) for _ in range(y_max - y_min + 1)]
    for x, y in white:
        rows[y_max - y][x - x_min] = "#"
    return "\n" + "\n".join("".join(row) for row in rows)


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day11.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()