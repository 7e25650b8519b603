"""Dispatcher that owns the committed result state."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from django_result_store.conf.settings import get_settings
from django_result_store.logging import get_store_logger
from django_result_store.metrics.prometheus import StoreMetrics, get_metrics
from django_result_store.results.actions import Action
from django_result_store.results.base import Result, StoreState, initial_state
from django_result_store.results.identifiers import IdFactory, get_id_factory
from django_result_store.results.reducer import reduce_results

Reducer = Callable[..., StoreState]
Listener = Callable[[StoreState], Any]


class ResultStore:
    """Hold the current result state and feed actions through the reducer.

    Every dispatch runs one transition and commits its output as the new
    current state, so the store serializes transitions into a single
    timeline. It is not thread-safe; callers sharing a store across threads
    must serialize ``dispatch`` themselves.
    """

    def __init__(
        self,
        reducer: Reducer = reduce_results,
        state: StoreState | None = None,
        id_factory: IdFactory | None = None,
        metrics: StoreMetrics | None = None,
        name: str = "default",
    ) -> None:
        settings = get_settings()
        self.name = name
        self.reducer = reducer
        self.id_factory = id_factory if id_factory is not None else get_id_factory()
        if metrics is None and settings["METRICS_ENABLED"]:
            metrics = get_metrics()
        self.metrics = metrics
        self.logger = get_store_logger(name)
        self._state = state if state is not None else initial_state()
        self._listeners: list[Listener] = []

    def get_state(self) -> StoreState:
        """Return the current committed state."""
        return self._state

    @property
    def results(self) -> tuple[Result, ...]:
        """Results of the current state, in insertion order."""
        return self._state.results

    def dispatch(self, action: Action) -> StoreState:
        """Apply an action and commit the resulting state.

        Listeners are called with the new state only when the transition
        produced a different state object. An exception raised by a listener
        propagates after the new state has been committed.

        Returns:
            The new current state.
        """
        previous = self._state
        action_type = getattr(action, "type", type(action).__name__)

        self._state = self.reducer(previous, action, id_factory=self.id_factory)
        changed = self._state is not previous

        if self.metrics is not None:
            self.metrics.record_dispatch(action_type)
            self.metrics.record_transition(
                self.name, len(previous.results), len(self._state.results), changed
            )

        if not changed:
            self.logger.debug("%s left the state unchanged", action_type)
            return self._state

        self.logger.debug(
            "%s: %d -> %d result(s)",
            action_type,
            len(previous.results),
            len(self._state.results),
        )
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after each state change.

        Returns:
            A function that removes the listener. Calling it twice is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


# Global store instance
_store: ResultStore | None = None


def get_store() -> ResultStore:
    """Get the process-wide default store, creating it on first use."""
    global _store
    if _store is None:
        _store = ResultStore()
    return _store


def reset_store() -> None:
    """Drop the process-wide default store."""
    global _store
    _store = None
