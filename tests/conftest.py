"""Shared fixtures for django-result-store tests."""

from __future__ import annotations

import itertools

import pytest

from django_result_store.metrics.prometheus import get_metrics
from django_result_store.results.store import reset_store


@pytest.fixture
def sequential_ids():
    """Deterministic id factory yielding 1, 2, 3, ..."""
    counter = itertools.count(1)
    return lambda: next(counter)


@pytest.fixture(autouse=True)
def clean_globals():
    """Reset the process-wide store and metrics around each test."""
    reset_store()
    get_metrics().reset()
    yield
    reset_store()
    get_metrics().reset()
