"""Monitoring station placement and asteroid vaporisation order."""

from __future__ import annotations

import math
from collections import defaultdict
from typing import Iterable, Iterator, Sequence

from aoc2019.numtheory import gcd
from aoc2019.points import Point2D
from aoc2019.runner import load_input, run_parts

TARGET_COUNT = 200


def parse_input(text: str) -> set[Point2D]:
    """Asteroid positions, x along a line and y down the lines."""
    return {
        Point2D(x, y)
        for y, line in enumerate(text.splitlines())
        for x, c in enumerate(line)
        if c == "#"
    }


def _reduce(point: Point2D) -> Point2D:
    d = abs(gcd(point.x, point.y))
    return Point2D(point.x // d, point.y // d)


def visible_from(asteroids: Iterable[Point2D], point: Point2D) -> int:
    """Number of distinct directions in which other asteroids lie."""
    return len({_reduce(other - point) for other in asteroids if other != point})


def _angle_to_y(point: Point2D) -> float:
    return -math.atan2(point.x, point.y)


def rays(asteroids: Iterable[Point2D], origin: Point2D) -> list[list[Point2D]]:
    """Asteroids grouped by direction, clockwise from up; nearest last in each group."""
    grouped: defaultdict[Point2D, list[tuple[int, Point2D]]] = defaultdict(list)
    for asteroid in asteroids:
        if asteroid == origin:
            continue
        delta = asteroid - origin
        direction = _reduce(delta)
        k = delta.x // direction.x if delta.x != 0 else delta.y // direction.y
        grouped[direction].append((k, asteroid))
    return [
        [point for _, point in sorted(members, key=lambda item: -item[0])]
        for _, members in sorted(grouped.items(), key=lambda kv: _angle_to_y(kv[0]))
    ]


def find_station(asteroids: set[Point2D]) -> tuple[Point2D, int]:
    """The asteroid seeing the most others, with that count."""
    if not asteroids:
        raise ValueError("no asteroids in the map")
    return max(
        ((a, visible_from(asteroids, a)) for a in asteroids), key=lambda item: item[1]
    )


def _vaporised(beams: list[list[Point2D]]) -> Iterator[Point2D]:
    while any(beams):
        for beam in beams:
            if beam:
                yield beam.pop()


def part1(text: str) -> int:
    return find_station(parse_input(text))[1]


def part2(text: str) -> int:
    """100 * x + y of the two-hundredth asteroid vaporised."""
    asteroids = parse_input(text)
    station, _ = find_station(asteroids)
    for count, point in enumerate(_vaporised(rays(asteroids, station)), start=1):
        if count == TARGET_COUNT:
            return 100 * point.x + point.y
    raise ValueError(f"fewer than {TARGET_COUNT} asteroids can be vaporised")


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day10.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()