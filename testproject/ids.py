"""Identifier factories used by the tests."""

from __future__ import annotations

import itertools

FIXED_ID = "fixed-id"

_sequence = itertools.count(1)


def fixed_id() -> str:
    """Always return the same id."""
    return FIXED_ID


def sequential_id() -> int:
    """Return 1, 2, 3, ... until ``reset_sequence`` is called."""
    return next(_sequence)


def reset_sequence() -> None:
    """Restart ``sequential_id`` at 1."""
    global _sequence
    _sequence = itertools.count(1)


NOT_CALLABLE = "not a function"
