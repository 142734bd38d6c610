"""Parsers for leading integers in text.

Each returns the parsed value together with the text that follows it.
"""

from __future__ import annotations

import re

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"-?[0-9]+")


def _take(pattern: re.Pattern[str], text: str) -> tuple[int, str]:
    match = pattern.match(text)
    if match is None:
        raise ValueError(f"expected a number at the start of {text[:20]!r}")
    return int(match.group()), text[match.end():]


def parse_unsigned(text: str) -> tuple[int, str]:
    """Parse a run of decimal digits; return (value, rest)."""
    return _take(_UNSIGNED, text)


def parse_signed(text: str) -> tuple[int, str]:
    """Parse digits with an optional leading minus; return (value, rest)."""
    return _take(_SIGNED, text)