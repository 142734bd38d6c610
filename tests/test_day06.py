import pytest

from aoc2019.days.day06 import parse_graph, part1, part2

TEST_INPUT1 = """COM)B
B)C
C)D
D)E
E)F
B)G
G)H
D)I
E)J
J)K
K)L"""

TEST_INPUT2 = TEST_INPUT1 + "\nK)YOU\nI)SAN"


def test_part1():
    assert part1(TEST_INPUT1) == 42


def test_part2():
    assert part2(TEST_INPUT2) == 4


def test_parse_graph_is_symmetric():
    graph = parse_graph(TEST_INPUT1)
    for node, neighbors in graph.items():
        for other in neighbors:
            assert node in graph[other]
    assert sorted(graph["B"]) == ["C", "COM", "G"]


def test_parse_graph_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_graph("COM)B\nBC")


def test_part2_unreachable():
    with pytest.raises(ValueError):
        part2("COM)YOU\nX)SAN")


def test_part1_requires_com():
    with pytest.raises(KeyError):
        part1("A)B")