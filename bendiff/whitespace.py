"""Whitespace handling for line comparison."""

from __future__ import annotations

from enum import Enum

_WHITESPACE = " \t\r"


class WhitespaceMode(Enum):
    """How whitespace is treated when comparing lines."""

    EXACT = "exact"
    IGNORE_TRAILING = "ignore_trailing"
    IGNORE_ALL = "ignore_all"


def make_comparison_key(line: str, mode: WhitespaceMode) -> str:
    """Return the key used to compare ``line`` under ``mode``.

    Whitespace means ASCII space, tab and carriage return only.
    """
    if mode is WhitespaceMode.IGNORE_TRAILING:
        return line.rstrip(_WHITESPACE)
    if mode is WhitespaceMode.IGNORE_ALL:
        return "".join(ch for ch in line if ch not in _WHITESPACE)
    return line