"""Advent of Code 2019 solutions and their shared grid, geometry and Intcode tools."""

__version__ = "0.1.0"