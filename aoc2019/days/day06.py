"""Orbit maps: total orbit counts and orbital transfers."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Sequence

from aoc2019.runner import load_input, run_parts


def parse_graph(text: str) -> dict[str, list[str]]:
    """Undirected adjacency lists from lines of the form A)B."""
    graph: defaultdict[str, list[str]] = defaultdict(list)
    for line in text.splitlines():
        parts = line.split(")")
        if len(parts) < 2:
            raise ValueError(f"bad orbit line: {line!r}")
        centre, satellite = parts[0], parts[1]
        graph[centre].append(satellite)
        graph[satellite].append(centre)
    return dict(graph)


def part1(text: str) -> int:
    """Sum of every object's depth below COM."""
    graph = parse_graph(text)
    depths = {"COM": 0}
    queue = deque([("COM", 0)])
    while queue:
        name, depth = queue.popleft()
        for neighbor in graph[name]:
            if neighbor not in depths:
                depths[neighbor] = depth + 1
                queue.append((neighbor, depth + 1))
    return sum(depths.values())


def part2(text: str) -> int:
    """Orbital transfers needed to move from the object YOU orbits to the one SAN orbits."""
    graph = parse_graph(text)
    seen = {"YOU"}
    queue = deque([("YOU", 0)])
    while queue:
        name, dist = queue.popleft()
        for neighbor in graph[name]:
            if neighbor == "SAN":
                return dist + 1 - 2
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append((neighbor, dist + 1))
    raise ValueError("SAN is not reachable from YOU")


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day06.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()