"""Actions understood by the result reducer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from django.db import models

from django_result_store.results.base import Identifier


class ActionType(models.TextChoices):
    """Tags of the actions the reducer acts on."""

    STORE_RESULT = "STORE_RESULT", "Store result"
    DELETE_RESULT = "DELETE_RESULT", "Delete result"


@dataclass(frozen=True, slots=True)
class StoreResult:
    """Append a new result holding ``result`` as its value."""

    result: Any

    @property
    def type(self) -> str:
        return ActionType.STORE_RESULT.value


@dataclass(frozen=True, slots=True)
class DeleteResult:
    """Remove every result whose id equals ``result_el_id``."""

    result_el_id: Identifier

    @property
    def type(self) -> str:
        return ActionType.DELETE_RESULT.value


@dataclass(frozen=True, slots=True)
class OtherAction:
    """Any action meant for another reducer. Passed through untouched."""

    type: str
    payload: dict[str, Any] = field(default_factory=dict)


Action = StoreResult | DeleteResult | OtherAction


def store_result(value: Any) -> StoreResult:
    """Create a StoreResult action."""
    return StoreResult(result=value)


def delete_result(result_id: Identifier) -> DeleteResult:
    """Create a DeleteResult action."""
    return DeleteResult(result_el_id=result_id)
