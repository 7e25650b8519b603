"""Helpers for building updated copies of immutable values."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, TypeVar

T = TypeVar("T")


def update_object(obj: T, **changes: Any) -> T:
    """Return a copy of ``obj`` with the given fields replaced.

    Fields not named in ``changes`` are shared with the original, not copied.

    Args:
        obj: A dataclass instance or a mapping.
        **changes: Field names and their new values.

    Returns:
        A new object of the same kind. ``obj`` itself is left untouched.

    Raises:
        TypeError: If ``obj`` is neither a dataclass instance nor a mapping.
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.replace(obj, **changes)
    if isinstance(obj, Mapping):
        return {**obj, **changes}  # type: ignore[return-value]
    raise TypeError(f"Cannot update object of type {type(obj).__name__}")
