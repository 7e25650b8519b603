"""Result storage components for django-result-store."""

from django_result_store.results.actions import (
    Action,
    ActionType,
    DeleteResult,
    OtherAction,
    StoreResult,
    delete_result,
    store_result,
)
from django_result_store.results.base import Identifier, Result, StoreState, initial_state
from django_result_store.results.reducer import reduce_results
from django_result_store.results.store import ResultStore, get_store, reset_store

__all__ = [
    "Action",
    "ActionType",
    "DeleteResult",
    "Identifier",
    "OtherAction",
    "Result",
    "ResultStore",
    "StoreResult",
    "StoreState",
    "delete_result",
    "get_store",
    "initial_state",
    "reduce_results",
    "reset_store",
    "store_result",
]
