"""Bugs spreading over a five by five grid, flat and recursively nested."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from aoc2019.grid import Grid, Position
from aoc2019.runner import load_input, run_parts

BUG = "#"
MINUTES = 200


def parse_simple(text: str) -> Grid[bool]:
    """True where a bug is."""
    return Grid([[c == BUG for c in line] for line in text.splitlines()])


def _shape(grid: Grid[bool]) -> tuple[int, int]:
    return len(list(grid.iter_col(0))), len(list(grid.iter_row(0)))


def next_grid(grid: Grid[bool]) -> Grid[bool]:
    """One minute: a bug survives with exactly one neighbour; a cell infests with one or two."""
    rows, cols = _shape(grid)
    result = []
    for i in range(rows):
        row = []
        for j in range(cols):
            position = Position(i, j)
            adjacent = sum(1 for n in grid.neighbors(position) if grid[n])
            row.append(adjacent == 1 if grid[position] else adjacent in (1, 2))
        result.append(row)
    return Grid(result)


def signature(grid: Grid[bool]) -> int:
    """Biodiversity rating: bit i*cols+j is set where a bug is."""
    rows, cols = _shape(grid)
    return sum(
        1 << (i * cols + j)
        for i in range(rows)
        for j in range(cols)
        if grid[Position(i, j)]
    )


@dataclass(frozen=True, order=True)
class Location:
    """A tile on a level of the recursive grid; deeper levels lie inside the centre."""

    i: int
    j: int
    level: int

    def neighbors(self) -> list[Location]:
        i, j, level = self.i, self.j, self.level
        result = []
        if i > 0 and (i, j) != (3, 2):
            result.append(Location(i - 1, j, level))
        if i < 4 and (i, j) != (1, 2):
            result.append(Location(i + 1, j, level))
        if j > 0 and (i, j) != (2, 3):
            result.append(Location(i, j - 1, level))
        if j < 4 and (i, j) != (2, 1):
            result.append(Location(i, j + 1, level))
        if i == 0:
            result.append(Location(1, 2, level - 1))
        if i == 4:
            result.append(Location(3, 2, level - 1))
        if j == 0:
            result.append(Location(2, 1, level - 1))
        if j == 4:
            result.append(Location(2, 3, level - 1))
        if (i, j) == (1, 2):
            result.extend(Location(0, k, level + 1) for k in range(5))
        if (i, j) == (3, 2):
            result.extend(Location(4, k, level + 1) for k in range(5))
        if (i, j) == (2, 1):
            result.extend(Location(k, 0, level + 1) for k in range(5))
        if (i, j) == (2, 3):
            result.extend(Location(k, 4, level + 1) for k in range(5))
        return result


def next_spaces(bugs: set[Location]) -> set[Location]:
    """One minute on the recursive grid."""
    counts = Counter(n for loc in bugs for n in loc.neighbors())
    return {
        loc
        for loc, n in counts.items()
        if (n == 1 if loc in bugs else n in (1, 2))
    }


def bugs_after(text: str, minutes: int) -> int:
    """Number of bugs on the recursive grid after the given minutes."""
    bugs = {
        Location(i, j, 0)
        for i, line in enumerate(text.splitlines())
        for j, c in enumerate(line)
        if c == BUG
    }
    for _ in range(minutes):
        bugs = next_spaces(bugs)
    return len(bugs)


def part1(text: str) -> int:
    """Biodiversity rating of the first layout seen twice."""
    grid = parse_simple(text)
    seen: set[int] = set()
    while True:
        rating = signature(grid)
        if rating in seen:
            return rating
        seen.add(rating)
        grid = next_grid(grid)


def part2(text: str) -> int:
    return bugs_after(text, MINUTES)


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day24.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()