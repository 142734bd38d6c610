"""Shortest walks through a donut maze whose portals may lead to nested levels."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import chain
from typing import Iterable, Sequence

from aoc2019.grid import Grid, Position
from aoc2019.runner import load_input, run_parts

OPEN = "."
BLANK = " "
ENTRANCE = ("A", "A")
EXIT = ("Z", "Z")

PortalName = tuple[str, str]


@dataclass(frozen=True)
class Node:
    """A position in the maze at a given recursion depth."""

    position: Position
    depth: int = 0


@dataclass
class Maze:
    """The maze grid with its entrance, exit and the two ends of every portal."""

    grid: Grid[str]
    start: Position
    end: Position
    inner_portals_by_name: dict[PortalName, Position]
    outer_portals_by_name: dict[PortalName, Position]
    inner_portals_by_pos: dict[Position, PortalName]
    outer_portals_by_pos: dict[Position, PortalName]

    def edges(self, node: Node, recurse: bool) -> list[Node]:
        """Nodes reachable in one step; with recurse, inner portals go one level down."""
        if self.grid[node.position] != OPEN:
            return []
        results = []
        name = self.inner_portals_by_pos.get(node.position)
        if name is not None:
            depth = node.depth + 1 if recurse else node.depth
            results.append(Node(self.outer_portals_by_name[name], depth))
        name = self.outer_portals_by_pos.get(node.position)
        if name is not None and (not recurse or node.depth > 0):
            depth = node.depth - 1 if recurse else node.depth
            results.append(Node(self.inner_portals_by_name[name], depth))
        results.extend(
            Node(neighbor, node.depth)
            for neighbor in self.grid.neighbors(node.position)
            if self.grid[neighbor] == OPEN
        )
        return results


def _filled(cells: Iterable[str]) -> int:
    return sum(1 for c in cells if c != BLANK)


def parse_input(text: str) -> Maze:
    """Read the maze, locating the hole in the middle and every labelled portal."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty maze")
    width = max(len(line) for line in lines)
    buffer = [list(line.ljust(width)) for line in lines]
    grid: Grid[str] = Grid(buffer)
    m, n = len(buffer), width

    def filled_row(i: int) -> int:
        if not 0 <= i < m:
            raise ValueError("the maze has no inner hole")
        return _filled(grid.iter_row(i))

    def filled_col(j: int) -> int:
        if not 0 <= j < n:
            raise ValueError("the maze has no inner hole")
        return _filled(grid.iter_col(j))

    row_count = filled_row(2)
    i0 = 2
    while filled_row(i0) == row_count:
        i0 += 1
    i1 = i0 + 1
    while filled_row(i1 + 1) != row_count:
        i1 += 1

    col_count = filled_col(2)
    j0 = 2
    while filled_col(j0) == col_count:
        j0 += 1
    j1 = j0 + 1
    while filled_col(j1 + 1) != col_count:
        j1 += 1

    P = Position
    outer = chain(
        ((P(0, j), P(1, j), P(2, j)) for j in range(n)),
        ((P(i, 0), P(i, 1), P(i, 2)) for i in range(m)),
        ((P(m - 2, j), P(m - 1, j), P(m - 3, j)) for j in range(n)),
        ((P(i, n - 2), P(i, n - 1), P(i, n - 3)) for i in range(m)),
    )
    inner = chain(
        ((P(i0, j), P(i0 + 1, j), P(i0 - 1, j)) for j in range(j0, j1 + 1)),
        ((P(i1 - 1, j), P(i1, j), P(i1 + 1, j)) for j in range(j0, j1 + 1)),
        ((P(i, j0), P(i, j0 + 1), P(i, j0 - 1)) for i in range(i0, i1 + 1)),
        ((P(i, j1 - 1), P(i, j1), P(i, j1 + 1)) for i in range(i0, i1 + 1)),
    )

    start: Position | None = None
    end: Position | None = None
    by_name: list[dict[PortalName, Position]] = [{}, {}]
    by_pos: list[dict[Position, PortalName]] = [{}, {}]

    for side, triples in enumerate((outer, inner)):
        for first, second, position in triples:
            a, b = grid[first], grid[second]
            if not (a.isalpha() and b.isalpha()):
                continue
            name = (a, b)
            if name == ENTRANCE:
                start = position
            elif name == EXIT:
                end = position
            else:
                by_name[side][name] = position
                by_pos[side][position] = name

    if start is None:
        raise ValueError("the maze has no AA entrance")
    if end is None:
        raise ValueError("the maze has no ZZ exit")

    return Maze(
        grid=grid,
        start=start,
        end=end,
        inner_portals_by_name=by_name[1],
        outer_portals_by_name=by_name[0],
        inner_portals_by_pos=by_pos[1],
        outer_portals_by_pos=by_pos[0],
    )


def shortest_steps(maze: Maze, recurse: bool) -> int:
    """Fewest steps from AA to ZZ at the outermost level."""
    start = Node(maze.start, 0)
    end = Node(maze.end, 0)
    queue = deque([(start, 0)])
    seen = {start}
    while queue:
        node, distance = queue.popleft()
        if node == end:
            return distance
        for following in maze.edges(node, recurse):
            if following not in seen:
                seen.add(following)
                queue.append((following, distance + 1))
    raise ValueError("no path from AA to ZZ")


def part1(text: str) -> int:
    return shortest_steps(parse_input(text), False)


def part2(text: str) -> int:
    return shortest_steps(parse_input(text), True)


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day20.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()