"""The result reducer: ``(state, action) -> new state``."""

from __future__ import annotations

import logging
from typing import Any

from django_result_store.logging import get_logger
from django_result_store.results.actions import (
    Action,
    DeleteResult,
    OtherAction,
    StoreResult,
)
from django_result_store.results.base import Result, StoreState, initial_state
from django_result_store.results.identifiers import IdFactory, get_id_factory
from django_result_store.results.utility import update_object
from django_result_store.runtime.redaction import describe_value

logger = get_logger("reducer")


def reduce_results(
    state: StoreState | None,
    action: Action,
    *,
    id_factory: IdFactory | None = None,
) -> StoreState:
    """Apply an action to a result state.

    The input state is never modified. Storing appends a new result with a
    freshly generated id; deleting drops every result with a matching id and
    is a no-op for unknown ids. Any other action returns ``state`` itself.

    Args:
        state: The current state, or None for the initial state.
        action: The action to apply.
        id_factory: Identifier source for new results. Defaults to the
            configured ``ID_STRATEGY``.

    Returns:
        The next state.
    """
    if state is None:
        state = initial_state()

    match action:
        case StoreResult():
            factory = id_factory if id_factory is not None else get_id_factory()
            result = Result(id=factory(), value=action.result)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Storing result %r: %s", result.id, _describe(result.value))
            return update_object(state, results=state.results + (result,))

        case DeleteResult():
            kept = tuple(r for r in state.results if r.id != action.result_el_id)
            removed = len(state.results) - len(kept)
            if not removed:
                logger.debug("No result with id %r to delete", action.result_el_id)
                return state
            logger.debug("Deleted %d result(s) with id %r", removed, action.result_el_id)
            return update_object(state, results=kept)

        case OtherAction():
            return state

        case _:
            # Action owned by some other reducer.
            return state


def _describe(value: Any) -> str:
    """Render a stored value for the debug log without failing the transition."""
    try:
        return describe_value(value)
    except Exception as e:
        return f"<unrenderable {type(value).__name__}: {type(e).__name__}>"
