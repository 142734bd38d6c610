"""The flawed frequency transmission algorithm."""

from __future__ import annotations

from functools import reduce
from itertools import accumulate, cycle, islice
from typing import Iterator, Sequence

from aoc2019.runner import load_input, run_parts

PHASES = 100
REPEATS = 10000
_BASE = (0, 1, 0, -1)


def pattern(n: int) -> Iterator[int]:
    """The repeating pattern for output position n (from 1), first element skipped."""
    if n < 1:
        raise ValueError("pattern positions start at 1")
    repeated = [value for value in _BASE for _ in range(n)]
    return islice(cycle(repeated), 1, None)


def fft(digits: Sequence[int]) -> list[int]:
    """Apply one phase of the transform."""
    return [
        abs(sum(d * p for d, p in zip(digits, pattern(n)))) % 10
        for n in range(1, len(digits) + 1)
    ]


def parse_digits(text: str) -> list[int]:
    return [ord(c) - ord("0") for c in text]


def _number(digits: Sequence[int]) -> int:
    return reduce(lambda acc, d: acc * 10 + d, digits, 0)


def part1(text: str) -> int:
    digits = parse_digits(text)
    for _ in range(PHASES):
        digits = fft(digits)
    return _number(digits[:8])


def part2(text: str) -> int:
    """Eight digits at the message offset of the repeated signal after all phases.

    The offset lies in the second half, where each digit becomes the sum of
    itself and every later digit, modulo ten.
    """
    original = parse_digits(text)
    length = REPEATS * len(original)
    offset = _number(original[:7])
    if 2 * offset + 1 < length:
        raise ValueError("message offset must lie in the second half of the signal")
    tail = [original[i % len(original)] for i in range(offset, length)]
    for _ in range(PHASES):
        sums = list(accumulate(reversed(tail)))
        tail = [s % 10 for s in reversed(sums)]
    return _number(tail[:8])


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day16.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()