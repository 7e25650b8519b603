"""Prometheus metrics for django-result-store."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class StoreMetrics:
    """Collector for result store metrics."""

    # Action counters, keyed by action type
    actions_dispatched: dict[str, int] = field(default_factory=dict)
    actions_ignored: int = 0

    # Result counters
    results_stored: int = 0
    results_deleted: int = 0

    # Current results per store
    result_counts: dict[str, int] = field(default_factory=dict)

    def record_dispatch(self, action_type: str) -> None:
        """Record an action being dispatched."""
        self.actions_dispatched[action_type] = self.actions_dispatched.get(action_type, 0) + 1

    def record_transition(
        self,
        store_name: str,
        previous_count: int,
        current_count: int,
        changed: bool,
    ) -> None:
        """Record the effect of one dispatched action on a store."""
        if not changed:
            self.actions_ignored += 1
        elif current_count > previous_count:
            self.results_stored += current_count - previous_count
        else:
            self.results_deleted += previous_count - current_count

        self.result_counts[store_name] = current_count

    def reset(self) -> None:
        """Zero every metric."""
        self.actions_dispatched.clear()
        self.actions_ignored = 0
        self.results_stored = 0
        self.results_deleted = 0
        self.result_counts.clear()

    def to_prometheus_format(self) -> str:
        """Export metrics in Prometheus text format."""
        lines = [
            "# HELP django_result_store_results_stored_total Total results stored",
            "# TYPE django_result_store_results_stored_total counter",
            f"django_result_store_results_stored_total {self.results_stored}",
            "",
            "# HELP django_result_store_results_deleted_total Total results deleted",
            "# TYPE django_result_store_results_deleted_total counter",
            f"django_result_store_results_deleted_total {self.results_deleted}",
            "",
            "# HELP django_result_store_actions_ignored_total Actions that left the state unchanged",
            "# TYPE django_result_store_actions_ignored_total counter",
            f"django_result_store_actions_ignored_total {self.actions_ignored}",
        ]

        if self.actions_dispatched:
            lines.extend(
                [
                    "",
                    "# HELP django_result_store_actions_dispatched_total Actions dispatched",
                    "# TYPE django_result_store_actions_dispatched_total counter",
                ]
            )
            for action_type, count in sorted(self.actions_dispatched.items()):
                lines.append(
                    f'django_result_store_actions_dispatched_total{{type="{action_type}"}} {count}'
                )

        if self.result_counts:
            lines.extend(
                [
                    "",
                    "# HELP django_result_store_results Current number of results",
                    "# TYPE django_result_store_results gauge",
                ]
            )
            for store_name, count in sorted(self.result_counts.items()):
                lines.append(f'django_result_store_results{{store="{store_name}"}} {count}')

        return "\n".join(lines)


# Global metrics collector instance
_metrics: StoreMetrics | None = None


def get_metrics() -> StoreMetrics:
    """Get the global metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = StoreMetrics()
    return _metrics
