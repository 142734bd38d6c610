import pytest

from aoc2019.days.day01 import part1, part2, total_fuel


def test_part1_pinned():
    assert part1("12") == 2


def test_part2_pinned():
    assert part2("1969") == 966
    assert part2("100756") == 50346


def test_part1_is_additive_over_lines():
    assert part1("12\n1969\n100756") == part1("12") + part1("1969") + part1("100756")


@pytest.mark.parametrize("mass", [0, 1, 5, 8])
def test_total_fuel_below_threshold_is_zero(mass):
    assert total_fuel(mass) == 0


@pytest.mark.parametrize("mass", [9, 14, 1969, 100756, 123456])
def test_total_fuel_covers_fuel_of_fuel(mass):
    fuel = mass // 3 - 2
    assert total_fuel(mass) == fuel + total_fuel(fuel)
    assert total_fuel(mass) >= part1(str(mass))


def test_part2_sums_total_fuel():
    assert part2("14\n1969") == total_fuel(14) + total_fuel(1969)


def test_bad_line_rejected():
    with pytest.raises(ValueError):
        part1("12\nheavy")