import pytest

from aoc2019.days.day03 import parse_input, part1, part2, trace_path
from aoc2019.points import Direction2D, Point2D

EXAMPLE = "R8,U5,L5,D3\nU7,R6,D4,L4"


def test_part1_example():
    assert part1(EXAMPLE) == 6


def test_part2_example():
    assert part2(EXAMPLE) == 30


def test_parse_input():
    assert parse_input("R8,U5\nL5,D3") == (
        [(Direction2D.RIGHT, 8), (Direction2D.UP, 5)],
        [(Direction2D.LEFT, 5), (Direction2D.DOWN, 3)],
    )


@pytest.mark.parametrize("text", ["R8,U5", "X1\nR1", "R1,\nU1", "R1\nU1\nL1", "\nR1"])
def test_parse_input_rejects(text):
    with pytest.raises(ValueError):
        parse_input(text)


def test_straight_path_counts_steps():
    path = trace_path([(Direction2D.RIGHT, 4)])
    assert len(path) == 5
    assert all(steps == point.l1_norm() for point, steps in path.items())


def test_path_keeps_first_visit():
    path = trace_path([(Direction2D.UP, 2), (Direction2D.DOWN, 2)])
    assert path[Point2D(0, 0)] == 0
    assert path[Point2D(0, 1)] == 1
    assert len(path) == 3


def test_part2_at_least_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_no_crossing_raises():
    with pytest.raises(ValueError):
        part1("R1\nU1")