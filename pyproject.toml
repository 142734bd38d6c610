[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc2019"
version = "0.1.0"
description = "Solutions to the 2019 Advent of Code puzzles, built around a reusable Intcode virtual machine."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "intcode", "aoc2019"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2019-day01 = "aoc2019.days.day01:main"
aoc2019-day02 = "aoc2019.days.day02:main"
aoc2019-day03 = "aoc2019.days.day03:main"
aoc2019-day04 = "aoc2019.days.day04:main"
aoc2019-day05 = "aoc2019.days.day05:main"
aoc2019-day06 = "aoc2019.days.day06:main"
aoc2019-day07 = "aoc2019.days.day07:main"
aoc2019-day08 = "aoc2019.days.day08:main"
aoc2019-day09 = "aoc2019.days.day09:main"
aoc2019-day10 = "aoc2019.days.day10:main"
aoc2019-day11 = "aoc2019.days.day11:main"
aoc2019-day12 = "aoc2019.days.day12:main"
aoc2019-day13 = "aoc2019.days.day13:main"
aoc2019-day14 = "aoc2019.days.day14:main"
aoc2019-day15 = "aoc2019.days.day15:main"
aoc2019-day16 = "aoc2019.days.day16:main"
aoc2019-day17 = "aoc2019.days.day17:main"
aoc2019-day18 = "aoc2019.days.day18:main"
aoc2019-day19 = "aoc2019.days.day19:main"
aoc2019-day20 = "aoc2019.days.day20:main"
aoc2019-day21 = "aoc2019.days.day21:main"
aoc2019-day22 = "aoc2019.days.day22:main"
aoc2019-day23 = "aoc2019.days.day23:main"
aoc2019-day24 = "aoc2019.days.day24:main"
aoc2019-day25 = "aoc2019.days.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc2019"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
