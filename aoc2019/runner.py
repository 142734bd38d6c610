"""Shared command-line entry for the daily solvers."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence

INPUT_DIR = Path("input")


def load_input(default_name: str, argv: Sequence[str] | None = None) -> str:
    """Read the puzzle input named on the command line, or input/<default_name>.

    Trailing line breaks are removed.
    """
    parser = argparse.ArgumentParser(description="Solve one day's puzzle.")
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=INPUT_DIR / default_name,
        help="puzzle input file",
    )
    args = parser.parse_args(argv)
    return args.input.read_text(encoding="utf-8").rstrip("\r\n")


def run_parts(
    input_text: str, parts: Iterable[tuple[str, Callable[[str], Any]]]
) -> list[Any]:
    """Run each labelled solver on the input, print timed results, return them."""
    results = []
    for label, solver in parts:
        start = time.perf_counter()
        result = solver(input_text)
        micros = int((time.perf_counter() - start) * 1_000_000)
        print(f"{label}: {result} (Time: {micros}μs)")
        results.append(result)
    return results