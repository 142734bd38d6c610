"""Integer points in two and three dimensions."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Point2D(NamedTuple):
    """A point on the plane; y grows upwards."""

    x: int
    y: int

    def __add__(self, other: tuple[int, int]) -> Point2D:  # type: ignore[override]
        return Point2D(self.x + other[0], self.y + other[1])

    def __sub__(self, other: tuple[int, int]) -> Point2D:
        return Point2D(self.x - other[0], self.y - other[1])

    def l1_norm(self) -> int:
        return abs(self.x) + abs(self.y)

    def l2_norm_sq(self) -> int:
        return self.x * self.x + self.y * self.y

    def neighbors(self) -> list[Point2D]:
        """The four adjacent points, in the order up, down, left, right."""
        return [self + direction.to_step() for direction in Direction2D]


class Direction2D(Enum):
    """A unit move on the plane, keyed by its letter."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    def to_step(self) -> Point2D:
        return _STEPS[self]


_STEPS = {
    Direction2D.UP: Point2D(0, 1),
    Direction2D.DOWN: Point2D(0, -1),
    Direction2D.LEFT: Point2D(-1, 0),
    Direction2D.RIGHT: Point2D(1, 0),
}


class Point3D(NamedTuple):
    """A point in space."""

    x: int
    y: int
    z: int

    def __add__(self, other: tuple[int, int, int]) -> Point3D:  # type: ignore[override]
        return Point3D(self.x + other[0], self.y + other[1], self.z + other[2])

    def __sub__(self, other: tuple[int, int, int]) -> Point3D:
        return Point3D(self.x - other[0], self.y - other[1], self.z - other[2])

    def l1_norm(self) -> int:
        return abs(self.x) + abs(self.y) + abs(self.z)