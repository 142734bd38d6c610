import pytest

from aoc2019.parsers import parse_signed, parse_unsigned


def test_unsigned_leaves_rest():
    assert parse_unsigned("123-456") == (123, "-456")


def test_signed_negative():
    assert parse_signed("-42,7") == (-42, ",7")


def test_signed_positive_whole_input():
    assert parse_signed("99") == (99, "")


@pytest.mark.parametrize("value", [0, 7, 12345, 119315717514047, 10**30])
@pytest.mark.parametrize("rest", ["", ",x", " => FUEL", "\n"])
def test_unsigned_round_trip(value, rest):
    assert parse_unsigned(f"{value}{rest}") == (value, rest)


@pytest.mark.parametrize("value", [-101741582076661, -1, 0, 2020])
def test_signed_round_trip(value):
    assert parse_signed(f"{value}>") == (value, ">")


@pytest.mark.parametrize("text", ["", "-5", "abc", " 1", "+3"])
def test_unsigned_rejects(text):
    with pytest.raises(ValueError):
        parse_unsigned(text)


@pytest.mark.parametrize("text", ["", "-", "--1", "x1", "+3"])
def test_signed_rejects(text):
    with pytest.raises(ValueError):
        parse_signed(text)