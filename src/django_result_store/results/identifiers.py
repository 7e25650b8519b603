"""Identifier generation for stored results.

The default ``timestamp`` strategy uses the current UTC time as the id, so
two results stored within the same clock tick (or across a clock adjustment)
can share an id. ``monotonic`` and ``uuid`` avoid that when it matters.
"""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from importlib import import_module

from django.core.exceptions import ImproperlyConfigured

from django_result_store.conf.settings import get_settings
from django_result_store.results.base import Identifier

IdFactory = Callable[[], Identifier]

_counter = itertools.count(1)


def timestamp_id() -> datetime:
    """Use the current UTC time as the id."""
    return datetime.now(timezone.utc)


def monotonic_id() -> int:
    """Return the next value of a process-wide counter."""
    return next(_counter)


def uuid_id() -> str:
    """Generate a random UUID hex string."""
    return uuid.uuid4().hex


ID_STRATEGIES: dict[str, IdFactory] = {
    "timestamp": timestamp_id,
    "monotonic": monotonic_id,
    "uuid": uuid_id,
}


def _import_factory(dotted_path: str) -> IdFactory:
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ImproperlyConfigured(f"Unknown id strategy '{dotted_path}'")

    try:
        module = import_module(module_path)
    except ImportError as e:
        raise ImproperlyConfigured(
            f"Could not import id factory module '{module_path}': {e}"
        ) from e

    try:
        factory = getattr(module, attr)
    except AttributeError as e:
        raise ImproperlyConfigured(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from e

    if not callable(factory):
        raise ImproperlyConfigured(f"'{dotted_path}' is not callable")
    return factory


def get_id_factory(strategy: str | None = None) -> IdFactory:
    """Resolve an identifier factory.

    Args:
        strategy: A built-in strategy name or a dotted path to a zero-argument
            callable. Defaults to the ``ID_STRATEGY`` setting.

    Returns:
        The factory callable.

    Raises:
        ImproperlyConfigured: If the strategy cannot be resolved.
    """
    if strategy is None:
        strategy = get_settings()["ID_STRATEGY"]

    if strategy in ID_STRATEGIES:
        return ID_STRATEGIES[strategy]
    return _import_factory(strategy)


def generate_result_id() -> Identifier:
    """Generate an id using the configured strategy."""
    return get_id_factory()()
