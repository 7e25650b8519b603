"""Logging helpers for django-result-store."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

LOGGER_NAME = "django_result_store"


class StoreLoggerAdapter(logging.LoggerAdapter):
    """Prefix log messages with the name of the store that emitted them."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        store_name = self.extra.get("store_name", "-") if self.extra else "-"
        return f"[store={store_name}] {msg}", kwargs


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the django_result_store namespace."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def get_store_logger(store_name: str) -> StoreLoggerAdapter:
    """Get a logger adapter bound to a store name.

    Args:
        store_name: Name of the store, included in every message.

    Returns:
        A logger adapter that prefixes messages with the store name.
    """
    return StoreLoggerAdapter(get_logger("store"), {"store_name": store_name})
