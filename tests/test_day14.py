import pytest

from aoc2019.days.day14 import Science, Substance, part1, part2

SIMPLE = """10 ORE => 10 A
1 ORE => 1 B
7 A, 1 B => 1 C
7 A, 1 C => 1 D
7 A, 1 D => 1 E
7 A, 1 E => 1 FUEL"""

LARGER = """157 ORE => 5 NZVS
165 ORE => 6 DCFZ
44 XJWVT, 5 KHKGT, 1 QDVJ, 29 NZVS, 9 GPVTF, 48 HKGWZ => 1 FUEL
12 HKGWZ, 1 GPVTF, 8 PSHF => 9 QDVJ
179 ORE => 7 PSHF
177 ORE => 5 HKGWZ
7 DCFZ, 7 PSHF => 2 XJWVT
165 ORE => 2 GPVTF
3 DCFZ, 7 NZVS, 5 HKGWZ, 10 PSHF => 8 KHKGT"""


def test_part1_simple_example():
    assert part1(SIMPLE) == 31


def test_part1_larger_example():
    assert part1(LARGER) == 13312


def test_part2_larger_example():
    assert part2(LARGER) == 82892753


def test_parse_orders_fuel_first_and_ore_last():
    science = Science.parse(SIMPLE)
    assert science.order[0] == "FUEL"
    assert science.order[-1] == "ORE"
    assert science.reactions["C"] == (1, [Substance(7, "A"), Substance(1, "B")])


def test_inputs_come_after_their_products():
    science = Science.parse(LARGER)
    for kind, (_, inputs) in science.reactions.items():
        for substance in inputs:
            assert science.indices[substance.kind] > science.indices[kind]


def test_ore_for_fuel_is_monotonic_and_subadditive():
    science = Science.parse(LARGER)
    one = science.ore_for_fuel(1)
    values = [science.ore_for_fuel(k) for k in range(1, 20)]
    assert values == sorted(values)
    assert all(v <= k * one for k, v in enumerate(values, start=1))


def test_direct_reaction():
    science = Science.parse("1 ORE => 1 FUEL")
    assert science.ore_for_fuel(7) == 7
    assert part2("1 ORE => 1 FUEL") == 1000000000000


def test_zero_fuel_rejected():
    with pytest.raises(ValueError):
        Science.parse(SIMPLE).ore_for_fuel(0)


def test_bad_line_rejected():
    with pytest.raises(ValueError):
        Science.parse("10 ORE -> 10 A")