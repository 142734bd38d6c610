import pytest

from aoc2019.days.day22 import (
    Instruction,
    Polymod,
    parse_instructions,
    part1,
    part2,
    shuffle_polymod,
)


def deck_after(text, n=10):
    shuffle = shuffle_polymod(parse_instructions(text), n)
    deck = [None] * n
    for card in range(n):
        deck[shuffle.apply(card)] = card
    return deck


def test_new_stack_reverses():
    assert deck_after("deal into new stack") == list(range(9, -1, -1))


def test_cut_positive_and_negative():
    assert deck_after("cut 3") == list(range(3, 10)) + list(range(3))
    assert deck_after("cut -4") == list(range(6, 10)) + list(range(6))


def test_increment_then_two_new_stacks():
    text = "deal with increment 7\ndeal into new stack\ndeal into new stack"
    assert deck_after(text) == [0, 3, 6, 9, 2, 5, 8, 1, 4, 7]


def test_cut_increment_new_stack():
    text = "cut 6\ndeal with increment 7\ndeal into new stack"
    assert deck_after(text) == [3, 0, 7, 4, 1, 8, 5, 2, 9, 6]


def test_parse_instructions():
    assert parse_instructions("deal into new stack\ncut -2\ndeal with increment 3") == [
        Instruction(Instruction.Kind.NEW_STACK),
        Instruction(Instruction.Kind.CUT, -2),
        Instruction(Instruction.Kind.INCREMENT, 3),
    ]


def test_parse_rejects_unknown_line():
    with pytest.raises(ValueError):
        parse_instructions("shuffle wildly")


def test_invert_undoes_map():
    p = Polymod(1234, 5678, 10007)
    undo = p.compose(p.invert())
    assert all(undo.apply(x) == x for x in range(0, 10007, 97))


def test_repeat_matches_repeated_compose():
    p = Polymod(3, 7, 101)
    manual = Polymod(0, 1, 101)
    for _ in range(13):
        manual = manual.compose(p)
    assert p.repeat(13) == manual
    assert p.repeat(0).apply(42) == 42


def test_compose_requires_same_modulus():
    with pytest.raises(ValueError):
        Polymod(0, 1, 10).compose(Polymod(0, 1, 11))


def test_part1_with_reversal():
    assert part1("deal into new stack") == 10007 - 1 - 2019


def test_part2_with_reversal():
    assert part2("deal into new stack") == 119315717514047 - 1 - 2020