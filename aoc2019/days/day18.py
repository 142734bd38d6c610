"""Collecting every key in a vault of locked doors, with one robot or four."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Mapping, Sequence, Union

from aoc2019.grid import Grid, Position
from aoc2019.runner import load_input, run_parts


class Space(Enum):
    OPEN = "open"
    WALL = "wall"


# A cell is open, a wall, or a door given by the index of its key.
Cell = Union[Space, int]


@dataclass(frozen=True)
class Node:
    """Where each robot stands and which keys (a bit mask) are held."""

    positions: tuple[Position, ...]
    keys: int = 0


class Vault:
    """The vault map with its keys and doors."""

    def __init__(self, grid: Grid[Cell], keys: Mapping[Position, int]) -> None:
        self.grid = grid
        self.keys = dict(keys)
        self.key_positions = {key: position for position, key in self.keys.items()}
        self.all_keys = 0
        for key in self.keys.values():
            self.all_keys |= 1 << key

    @classmethod
    def parse(cls, text: str) -> tuple[Vault, list[Position]]:
        """Read the map; return the vault and the entrance positions."""
        rows: list[list[Cell]] = []
        starts: list[Position] = []
        keys: dict[Position, int] = {}
        for i, line in enumerate(text.splitlines()):
            row: list[Cell] = []
            for j, char in enumerate(line):
                position = Position(i, j)
                if char == "#":
                    row.append(Space.WALL)
                elif char in ".@":
                    row.append(Space.OPEN)
                    if char == "@":
                        starts.append(position)
                elif "a" <= char <= "z":
                    row.append(Space.OPEN)
                    keys[position] = ord(char) - ord("a")
                elif "A" <= char <= "Z":
                    row.append(ord(char) - ord("A"))
                else:
                    raise ValueError(f"unexpected character {char!r} in the vault")
            rows.append(row)
        return cls(Grid(rows), keys), starts

    def min_paths(self, start: Position) -> dict[int, dict[int, int]]:
        """For each reachable key, the fewest steps for each set of doors passed."""
        best: dict[int, dict[int, int]] = {}
        stack = [(start, frozenset([start]), 0, 0)]
        while stack:
            position, visited, steps, doors = stack.pop()
            key = self.keys.get(position)
            if key is not None:
                by_doors = best.setdefault(key, {})
                if steps < by_doors.get(doors, math.inf):
                    by_doors[doors] = steps
            for neighbor in self.grid.neighbors(position):
                if neighbor in visited:
                    continue
                cell = self.grid[neighbor]
                if cell is Space.WALL:
                    continue
                passed = doors if cell is Space.OPEN else doors | (1 << cell)
                stack.append((neighbor, visited | {neighbor}, steps + 1, passed))
        return best

    def min_steps(self, start: Node) -> int:
        """Fewest steps from start until every key in the vault is held."""
        dists = {start: 0}
        tie = count()
        heap = [(0, next(tie), start)]
        reachable: dict[Position, dict[int, dict[int, int]]] = {}
        while heap:
            steps, _, node = heapq.heappop(heap)
            if node.keys & self.all_keys == self.all_keys:
                return steps
            if steps > dists.get(node, math.inf):
                continue
            for n, position in enumerate(node.positions):
                if position not in reachable:
                    reachable[position] = self.min_paths(position)
                for key, by_doors in sorted(reachable[position].items()):
                    if node.keys & (1 << key):
                        continue
                    options = [
                        d for needed, d in by_doors.items() if node.keys & needed == needed
                    ]
                    if not options:
                        continue
                    moved = (
                        node.positions[:n]
                        + (self.key_positions[key],)
                        + node.positions[n + 1:]
                    )
                    following = Node(moved, node.keys | (1 << key))
                    total = steps + min(options)
                    if total < dists.get(following, math.inf):
                        dists[following] = total
                        heapq.heappush(heap, (total, next(tie), following))
        raise ValueError("not every key can be reached")


def split_vault(text: str) -> str:
    """Wall off the entrance and place four entrances on its diagonals."""
    rows = [list(line) for line in text.splitlines()]
    found = next(
        ((i, j) for i, row in enumerate(rows) for j, c in enumerate(row) if c == "@"),
        None,
    )
    if found is None:
        raise ValueError("the vault has no entrance")
    i, j = found
    if i == 0 or j == 0:
        raise ValueError("the entrance lies on the edge of the map")
    try:
        for di, dj in ((-1, -1), (-1, 1), (1, -1), (1, 1)):
            rows[i + di][j + dj] = "@"
        for di, dj in ((-1, 0), (0, -1), (0, 0), (0, 1), (1, 0)):
            rows[i + di][j + dj] = "#"
    except IndexError:
        raise ValueError("the entrance lies on the edge of the map") from None
    return "\n".join("".join(row) for row in rows)


def _solve(text: str) -> int:
    vault, starts = Vault.parse(text)
    return vault.min_steps(Node(tuple(starts)))


def part1(text: str) -> int:
    return _solve(text)


def part2(text: str) -> int:
    return _solve(split_vault(text))


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day18.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()