"""Metrics components for django-result-store."""

from django_result_store.metrics.prometheus import StoreMetrics, get_metrics

__all__ = [
    "get_metrics",
    "StoreMetrics",
]
