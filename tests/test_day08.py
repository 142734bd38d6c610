import pytest

from aoc2019.days.day08 import HEIGHT, LAYER_SIZE, WIDTH, part1, part2, render_image


def test_rendered_image_has_format_dimensions():
    rows = render_image("1" * 150).split("\n")
    assert len(rows) == 6
    assert [len(row) for row in rows] == [25] * 6
    assert (WIDTH, HEIGHT, LAYER_SIZE) == (25, 6, 150)


def test_part1_picks_layer_with_fewest_zeros():
    ones, twos = 45, 100
    many_zeros = "0" * 10 + "1" * 40 + "2" * 100
    few_zeros = "0" * 5 + "1" * ones + "2" * twos
    assert part1(many_zeros + few_zeros) == ones * twos


def test_part1_ties_go_to_first_layer():
    first = "0" * 5 + "1" * 145
    second = "0" * 5 + "1" * 45 + "2" * 100
    assert part1(first + second) == first.count("1") * first.count("2")


def test_part1_empty_input():
    with pytest.raises(ValueError):
        part1("")


def test_render_transparent_top_layer():
    top = "2" * LAYER_SIZE
    bottom = "0" * WIDTH + "1" * (LAYER_SIZE - WIDTH)
    expected = "\n".join([" " * WIDTH] + ["#" * WIDTH] * (HEIGHT - 1))
    assert render_image(top + bottom) == expected


def test_render_top_layer_wins():
    top = "1" * LAYER_SIZE
    bottom = "0" * LAYER_SIZE
    rows = render_image(top + bottom).split("\n")
    assert rows == ["#" * WIDTH] * HEIGHT


def test_part2_prints_image(capsys):
    text = "0" * LAYER_SIZE
    assert part2(text) == "See above"
    assert capsys.readouterr().out == render_image(text) + "\n"