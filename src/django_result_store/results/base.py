"""Result and store state types."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

# Timestamp ids by default; monotonic and uuid strategies give int and str.
Identifier = datetime | int | str


@dataclass(frozen=True, slots=True)
class Result:
    """A single stored record: a generated id and an opaque value."""

    id: Identifier
    value: Any


@dataclass(frozen=True, slots=True)
class StoreState:
    """Ordered collection of all currently retained results.

    The results tuple is in insertion order, which is also display order.
    States are never modified; transitions build new ones that share the
    unchanged ``Result`` objects.
    """

    results: tuple[Result, ...] = ()

    def get(self, result_id: Identifier) -> Result | None:
        """Return the first result with the given id, or None."""
        for result in self.results:
            if result.id == result_id:
                return result
        return None

    def ids(self) -> list[Identifier]:
        """Return result ids in insertion order."""
        return [result.id for result in self.results]


def initial_state() -> StoreState:
    """Build the canonical empty state."""
    return StoreState(results=())
