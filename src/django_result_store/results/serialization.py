"""JSON-friendly encoding of result states and actions."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from django_result_store.results.actions import (
    Action,
    ActionType,
    DeleteResult,
    OtherAction,
    StoreResult,
)
from django_result_store.results.base import Identifier, Result, StoreState


class ActionDecodeError(ValueError):
    """Raised when a mapping cannot be decoded into an action."""


def encode_identifier(value: Identifier) -> int | str:
    """Encode an id as a JSON-compatible value.

    Datetimes become ISO-8601 strings; ints and strings pass through.
    """
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def decode_identifier(value: Any) -> Identifier:
    """Decode an id produced by ``encode_identifier``.

    Strings that parse as ISO-8601 datetimes become datetimes, so timestamp
    ids compare equal after a round trip.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"Unsupported identifier type: {type(value).__name__}")
    if isinstance(value, str) and "-" in value and ":" in value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return value
    return value


def state_to_dict(state: StoreState) -> dict[str, Any]:
    """Convert a state into a JSON-serializable dict."""
    return {
        "results": [
            {"id": encode_identifier(result.id), "value": result.value}
            for result in state.results
        ]
    }


def state_from_dict(data: dict[str, Any]) -> StoreState:
    """Rebuild a state from ``state_to_dict`` output."""
    return StoreState(
        results=tuple(
            Result(id=decode_identifier(item["id"]), value=item.get("value"))
            for item in data.get("results", [])
        )
    )


def action_from_dict(data: Any) -> Action:
    """Decode an action mapping.

    Args:
        data: ``{"type": "STORE_RESULT", "result": ...}``,
            ``{"type": "DELETE_RESULT", "resultElId": ...}``, or any other
            mapping with a ``type`` key.

    Returns:
        The matching action variant. Unrecognized types give ``OtherAction``.

    Raises:
        ActionDecodeError: If the mapping is malformed.
    """
    if not isinstance(data, dict):
        raise ActionDecodeError(f"Action must be an object, got {type(data).__name__}")

    action_type = data.get("type")
    if not isinstance(action_type, str) or not action_type:
        raise ActionDecodeError("Action is missing a 'type'")

    if action_type == ActionType.STORE_RESULT:
        return StoreResult(result=data.get("result"))

    if action_type == ActionType.DELETE_RESULT:
        if "resultElId" not in data:
            raise ActionDecodeError("DELETE_RESULT action is missing 'resultElId'")
        try:
            return DeleteResult(result_el_id=decode_identifier(data["resultElId"]))
        except TypeError as e:
            raise ActionDecodeError(str(e)) from e

    payload = {key: value for key, value in data.items() if key != "type"}
    return OtherAction(type=action_type, payload=payload)
