"""A repair droid exploring an unknown maze to find the oxygen system."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import NamedTuple, Sequence

from aoc2019.intcode.core import LogicError, Signal
from aoc2019.intcode.cpu import CPU
from aoc2019.points import Direction2D, Point2D
from aoc2019.runner import load_input, run_parts

ORIGIN = Point2D(0, 0)


class Response(IntEnum):
    WALL = 0
    OPEN = 1
    OXYGEN_SYSTEM = 2


_DIRECTION_CODES = {
    Direction2D.UP: 1,
    Direction2D.DOWN: 2,
    Direction2D.LEFT: 3,
    Direction2D.RIGHT: 4,
}
_SEARCH_ORDER = (Direction2D.UP, Direction2D.DOWN, Direction2D.LEFT, Direction2D.RIGHT)


class BFSResult(NamedTuple):
    distance: int
    step_dir: Direction2D | None


class Robot:
    """Steers the droid towards the nearest unexplored cell and maps the replies."""

    def __init__(self) -> None:
        self.position = ORIGIN
        self.explored: dict[Point2D, Response] = {ORIGIN: Response.OPEN}
        self.oxygen_system: Point2D | None = None
        self.cur_path: deque[Direction2D] = deque()
        self.cur_target: Point2D | None = None

    def bfs_until_unseen(
        self, start: Point2D
    ) -> tuple[dict[Point2D, BFSResult], Point2D | None]:
        """Search open cells from start, stopping at the first unexplored one."""
        results = {start: BFSResult(0, None)}
        queue = deque([start])
        while queue:
            point = queue.popleft()
            distance = results[point].distance
            for direction in _SEARCH_ORDER:
                neighbor = point + direction.to_step()
                if neighbor in results or self.explored.get(neighbor) is Response.WALL:
                    continue
                results[neighbor] = BFSResult(distance + 1, direction)
                queue.append(neighbor)
                if neighbor not in self.explored:
                    return results, neighbor
        return results, None

    def distance(self, start: Point2D, end: Point2D) -> int | None:
        results, _ = self.bfs_until_unseen(start)
        found = results.get(end)
        return None if found is None else found.distance

    def provide_input(self) -> tuple[Signal, int | None]:
        if not self.cur_path:
            results, target = self.bfs_until_unseen(self.position)
            if target is not None:
                path = []
                point = target
                while (found := results.get(point)) is not None and found.step_dir:
                    path.append(found.step_dir)
                    point = point - found.step_dir.to_step()
                self.cur_path.extend(reversed(path))
        if self.cur_path:
            direction = self.cur_path.popleft()
            self.cur_target = self.position + direction.to_step()
            return Signal.CONTINUE, _DIRECTION_CODES[direction]
        return Signal.AWAITING_INPUT, None

    def receive_input(self, value: object) -> None:
        raise LogicError("Should not be asked for input...")

    def handle_output(self, value: int) -> Signal:
        target = self.cur_target
        if target is None:
            raise LogicError("Shouldn't get output without a target...")
        try:
            response = Response(value)
        except ValueError:
            raise LogicError("bad output from program") from None
        self.explored[target] = response
        if response is not Response.WALL:
            self.position = target
        if response is Response.OXYGEN_SYSTEM:
            self.oxygen_system = target
        return Signal.CONTINUE


def _explore(text: str) -> tuple[Robot, Point2D]:
    robot = Robot()
    CPU.parse(text).wrap(robot).run()
    if robot.oxygen_system is None:
        raise LogicError("Didn't find O2 system")
    return robot, robot.oxygen_system


def part1(text: str) -> int:
    """Fewest moves from the start to the oxygen system."""
    robot, oxygen = _explore(text)
    distance = robot.distance(ORIGIN, oxygen)
    if distance is None:
        raise LogicError("Didn't find a path from (0, 0) to O2")
    return distance


def part2(text: str) -> int:
    """Minutes for oxygen to spread from the system to every open cell."""
    robot, oxygen = _explore(text)
    results, target = robot.bfs_until_unseen(oxygen)
    if target is not None:
        raise LogicError("The maze was not fully explored")
    return max(r.distance for r in results.values())


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day15.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()