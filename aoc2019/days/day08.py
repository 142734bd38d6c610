"""Layered space image format."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from aoc2019.runner import load_input, run_parts

WIDTH = 25
HEIGHT = 6
LAYER_SIZE = WIDTH * HEIGHT


def _layers(text: str) -> list[str]:
    return [text[i:i + LAYER_SIZE] for i in range(0, len(text), LAYER_SIZE)]


def part1(text: str) -> int:
    """Ones times twos in the layer with the fewest zeros."""
    counts = min((Counter(layer) for layer in _layers(text)), key=lambda c: c["0"])
    return counts["1"] * counts["2"]


def render_image(text: str) -> str:
    """Stack the layers, topmost visible pixel winning; '#' for lit, ' ' for black."""
    pixels = ["2"] * LAYER_SIZE
    for layer in _layers(text):
        pixels = [
            new if old == "2" else old for old, new in zip(pixels, layer)
        ] + pixels[len(layer):]
    image = "".join(" " if c == "0" else "#" for c in pixels)
    return "\n".join(image[i:i + WIDTH] for i in range(0, LAYER_SIZE, WIDTH))


def part2(text: str) -> str:
    print(render_image(text))
    return "See above"


def main(argv: Sequence[str] | None = None) -> None:
    run_parts(load_input("day08.txt", argv), [("Part 1", part1), ("Part 2", part2)])


if __name__ == "__main__":
    main()