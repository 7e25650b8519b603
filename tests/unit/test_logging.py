"""Unit tests for logging helpers."""

from __future__ import annotations

import logging

from django_result_store.logging import get_logger, get_store_logger
from django_result_store.results.actions import store_result
from django_result_store.results.reducer import reduce_results


class TestLoggers:
    """Tests for logger construction."""

    def test_namespaced_logger(self) -> None:
        """Test that loggers live under the package namespace."""
        assert get_logger().name == "django_result_store"
        assert get_logger("reducer").name == "django_result_store.reducer"

    def test_store_logger_prefixes_store_name(self, caplog) -> None:
        """Test that store loggers tag messages with the store name."""
        logger = get_store_logger("main")
        with caplog.at_level(logging.INFO, logger="django_result_store.store"):
            logger.info("hello")

        assert caplog.messages == ["[store=main] hello"]


class TestReducerLogging:
    """Tests for what the reducer writes to the log."""

    def test_stored_values_are_redacted(self, caplog) -> None:
        """Test that secrets in stored values do not reach the log."""
        with caplog.at_level(logging.DEBUG, logger="django_result_store.reducer"):
            reduce_results(None, store_result({"password": "hunter2"}), id_factory=lambda: 1)

        assert "hunter2" not in caplog.text
        assert "[REDACTED]" in caplog.text

    def test_self_referencing_value_is_stored(self, caplog) -> None:
        """Test that a value containing itself is logged and stored."""
        value: list = []
        value.append(value)
        with caplog.at_level(logging.DEBUG, logger="django_result_store.reducer"):
            state = reduce_results(None, store_result(value), id_factory=lambda: 1)

        assert state.results[0].value is value
        assert "<recursive>" in caplog.text

    def test_unrenderable_value_is_stored(self, caplog) -> None:
        """Test that a value whose repr fails does not abort the transition."""

        class Opaque:
            def __repr__(self) -> str:
                raise RuntimeError("no repr")

        value = Opaque()
        with caplog.at_level(logging.DEBUG, logger="django_result_store.reducer"):
            state = reduce_results(None, store_result(value), id_factory=lambda: 1)

        assert state.results[0].value is value
        assert "<unrenderable Opaque: RuntimeError>" in caplog.text
