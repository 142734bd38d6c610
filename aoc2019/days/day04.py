"""Counting passwords with non-decreasing digits in a range."""

from __future__ import annotations

from functools import reduce
from typing import Iterator, Sequence

from aoc2019.parsers import parse_unsigned
from aoc2019.runner import load_input, run_parts


def _value(digits: Sequence[int]) -> int:
    return reduce(lambda acc, d: acc * 10 + d, digits, 0)


def min_nondecreasing_at_least(n: int) -> list[int]:
    """Digits of the number formed by carrying each digit forward where it would drop."""
    if n < 1:
        raise ValueError("expected a positive number")
    digits: list[int] = []
    for ch in str(n):
        d = int(ch)
        digits.append(max(d, digits[-1]) if digits else d)
    return digits


def nondecreasing_sequences(low: int, high: int) -> Iterator[list[int]]:
    """Yield digit lists with non-decreasing digits, from low up to high."""
    digits = min_nondecreasing_at_least(low)
    while _value(digits) <= high:
        yield list(digits)
        prefix = len(digits)
        while prefix and digits[prefix - 1] == 9:
            prefix -= 1
        if prefix == 0:
            digits.insert(0, 1)
        else:
            digits[prefix - 1] += 1
            digits[prefix:] = [digits[prefix - 1]] * (len(digits) - prefix)


def contains_pair(digits: Sequence[int]) -> bool:
    return any(a == b for a, b in zip(digits, digits[1:]))


def contains_isolated_pair(digits: Sequence[int]) -> bool:
    """True if some run of equal digits has length exactly two."""
    if digits[0] == digits[1] != digits[2]:
        return True
    if digits[-1] == digits[-2] != digits[-3]:
        return True
    return any(
        b == c and a != b and c != d
        for a, b, c, d in zip(digits, digits[1:], digits[2:], digits[3:])
    )


def parse_input(text: str) -> tuple[int, int]:
    """Parse a range written as LOW-HIGH."""
    low, rest = parse_unsigned(text)
    if not rest.startswith("-"):
        raise ValueError("expected '-' between the bounds")
    high, _ = parse_unsigned(rest[1:])
    return low, high


def part1(text: str) -> int:
    low, high = parse_input(text)
    return sum(1 for seq in nondecreasing_sequences(low, high) if contains_pair(seq))


def part2(text: str) -> int:
    low, high = parse_input(text)
    return sum(
        1 for seq in nondecreasing_sequences(low, high) if contains_isolated_pair(seq)
    )


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day04.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()