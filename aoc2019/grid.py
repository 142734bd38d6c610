"""Rectangular grids addressed by (row, column) positions."""

from __future__ import annotations

from enum import Enum
from typing import Generic, Iterable, Iterator, NamedTuple, TypeVar

T = TypeVar("T")


class Direction(Enum):
    """A compass direction on a grid, where up decreases the row."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def clockwise(self) -> Direction:
        return _CLOCKWISE[self]

    def counterclockwise(self) -> Direction:
        return _COUNTERCLOCKWISE[self]


_CLOCKWISE = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}
_COUNTERCLOCKWISE = {after: before for before, after in _CLOCKWISE.items()}


class Position(NamedTuple):
    """A (row, column) position with non-negative coordinates."""

    row: int
    col: int

    def step(self, direction: Direction) -> Position | None:
        """Move one cell; None if that would leave the non-negative quadrant."""
        row, col = self
        match direction:
            case Direction.UP:
                return None if row == 0 else Position(row - 1, col)
            case Direction.DOWN:
                return Position(row + 1, col)
            case Direction.LEFT:
                return None if col == 0 else Position(row, col - 1)
            case Direction.RIGHT:
                return Position(row, col + 1)
        raise ValueError(f"unknown direction: {direction!r}")


class Grid(Generic[T]):
    """A non-empty rectangle of values indexed by Position."""

    def __init__(self, vals: Iterable[Iterable[T]]) -> None:
        rows = [list(row) for row in vals]
        if not rows:
            raise ValueError("a grid needs at least one row")
        cols = len(rows[0])
        if any(len(row) != cols for row in rows):
            raise ValueError("all rows of a grid must have the same length")
        self.vals = rows
        self.rows = len(rows)
        self.cols = cols

    @classmethod
    def from_string(cls, text: str) -> Grid[str]:
        """Build a character grid, one row per line of text."""
        return cls(list(line) for line in text.splitlines())

    def __getitem__(self, position: tuple[int, int]) -> T:
        row, col = position
        return self.vals[row][col]

    def __setitem__(self, position: tuple[int, int], value: T) -> None:
        row, col = position
        self.vals[row][col] = value

    def iter_row(self, row: int) -> Iterator[T]:
        return iter(self.vals[row])

    def iter_col(self, col: int) -> Iterator[T]:
        return (row[col] for row in self.vals)

    def step_from(self, position: Position, direction: Direction) -> Position | None:
        """Move one cell, or None if that would leave the grid."""
        row, col = position
        if direction is Direction.UP and row > 0:
            return Position(row - 1, col)
        if direction is Direction.DOWN and row + 1 < self.rows:
            return Position(row + 1, col)
        if direction is Direction.LEFT and col > 0:
            return Position(row, col - 1)
        if direction is Direction.RIGHT and col + 1 < self.cols:
            return Position(row, col + 1)
        return None

    def neighbors(self, position: Position) -> list[Position]:
        """Positions inside the grid next to position: up, down, left, right."""
        order = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
        return [p for d in order if (p := self.step_from(position, d)) is not None]