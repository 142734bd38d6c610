import pytest

from aoc2019.grid import Direction, Grid, Position


def test_clockwise_table_matches_compass():
    assert Direction.UP.clockwise() is Direction.RIGHT
    assert Direction.RIGHT.clockwise() is Direction.DOWN
    assert Direction.DOWN.clockwise() is Direction.LEFT
    assert Direction.LEFT.clockwise() is Direction.UP


def test_turns_are_inverse():
    round_trips = [Direction.clockwise(d).counterclockwise() for d in Direction]
    assert round_trips == list(Direction)
    back_trips = [Direction.counterclockwise(d).clockwise() for d in Direction]
    assert back_trips == list(Direction)


def test_four_turns_return_to_start():
    results = []
    for direction in Direction:
        current = direction
        for _ in range(4):
            current = Direction.clockwise(current)
        results.append(current)
    assert results == list(Direction)


def test_counterclockwise_table_matches_compass():
    assert Direction.UP.counterclockwise() is Direction.LEFT
    assert Direction.LEFT.counterclockwise() is Direction.DOWN
    assert Direction.DOWN.counterclockwise() is Direction.RIGHT
    assert Direction.RIGHT.counterclockwise() is Direction.UP


def test_position_step_stops_at_zero():
    assert Position(0, 3).step(Direction.UP) is None
    assert Position(3, 0).step(Direction.LEFT) is None


def test_position_step_moves_one_cell():
    start = Position(2, 3)
    assert start.step(Direction.UP) == Position(1, 3)
    assert start.step(Direction.DOWN) == Position(3, 3)
    assert start.step(Direction.LEFT) == Position(2, 2)
    assert start.step(Direction.RIGHT) == Position(2, 4)


def test_from_string_and_indexing():
    grid = Grid.from_string("abc\ndef")
    assert (grid.rows, grid.cols) == (2, 3)
    assert grid[Position(1, 2)] == "f"
    assert grid[Position(0, 0)] == "a"


def test_setitem_updates_value():
    grid = Grid.from_string("ab\ncd")
    grid[Position(1, 0)] = "z"
    assert grid[Position(1, 0)] == "z"
    assert grid.vals[1] == ["z", "d"]


def test_iter_row_and_col():
    grid = Grid.from_string("abc\ndef")
    assert list(grid.iter_row(0)) == list("abc")
    assert list(grid.iter_col(1)) == ["b", "e"]


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Grid([[1, 2], [3]])


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        Grid.from_string("")


def test_step_from_respects_bounds():
    grid = Grid.from_string("ab\ncd")
    assert grid.step_from(Position(1, 1), Direction.DOWN) is None
    assert grid.step_from(Position(1, 1), Direction.RIGHT) is None
    assert grid.step_from(Position(0, 0), Direction.UP) is None
    assert grid.step_from(Position(0, 0), Direction.DOWN) == Position(1, 0)


def test_neighbors_order_and_bounds():
    grid = Grid.from_string("abc\ndef\nghi")
    assert grid.neighbors(Position(0, 0)) == [Position(1, 0), Position(0, 1)]
    assert grid.neighbors(Position(1, 1)) == [
        Position(0, 1),
        Position(2, 1),
        Position(1, 0),
        Position(1, 2),
    ]