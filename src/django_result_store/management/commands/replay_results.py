"""Django management command that replays actions through a result store."""

from __future__ import annotations

import json
import sys
from typing import Any

from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError, CommandParser

from django_result_store.metrics.prometheus import StoreMetrics
from django_result_store.results.identifiers import get_id_factory
from django_result_store.results.serialization import (
    ActionDecodeError,
    action_from_dict,
    state_to_dict,
)
from django_result_store.results.store import ResultStore


class Command(BaseCommand):
    """Replay a sequence of JSON actions and print the final state."""

    help = (
        "Replay STORE_RESULT / DELETE_RESULT actions from a JSON array or JSON "
        "lines file through a fresh result store and print the final state"
    )

    def add_arguments(self, parser: CommandParser) -> None:
        """Add command arguments."""
        parser.add_argument(
            "path",
            nargs="?",
            default="-",
            help="File with actions to replay (default: stdin)",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=None,
            help="Indent the JSON output by this many spaces",
        )
        parser.add_argument(
            "--metrics",
            action="store_true",
            help="Also print store metrics in Prometheus text format",
        )
        parser.add_argument(
            "--id-strategy",
            type=str,
            default=None,
            help="Identifier strategy: timestamp, monotonic, uuid or a dotted path "
            "(default: from settings)",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Replay the actions."""
        raw_actions = self._load_actions(options["path"])

        try:
            id_factory = get_id_factory(options.get("id_strategy"))
        except ImproperlyConfigured as e:
            raise CommandError(str(e)) from e

        metrics = StoreMetrics()
        store = ResultStore(id_factory=id_factory, metrics=metrics, name="replay")

        for index, raw in enumerate(raw_actions):
            try:
                action = action_from_dict(raw)
            except ActionDecodeError as e:
                raise CommandError(f"Invalid action at position {index}: {e}") from e
            store.dispatch(action)

        self.stdout.write(
            json.dumps(state_to_dict(store.get_state()), indent=options.get("indent"), default=str)
        )

        if options.get("metrics"):
            self.stdout.write("")
            self.stdout.write(metrics.to_prometheus_format())

        self.stderr.write(
            self.style.SUCCESS(
                f"Replayed {len(raw_actions)} action(s), {len(store.results)} result(s) retained"
            )
        )

    def _load_actions(self, path: str) -> list[Any]:
        """Read actions from a file or stdin.

        Accepts a JSON array, or one JSON object per line.
        """
        try:
            if path == "-":
                text = sys.stdin.read()
            else:
                with open(path, encoding="utf-8") as f:
                    text = f.read()
        except OSError as e:
            raise CommandError(f"Could not read actions from '{path}': {e}") from e

        stripped = text.strip()
        if not stripped:
            return []

        if stripped.startswith("["):
            try:
                actions = json.loads(stripped)
            except json.JSONDecodeError as e:
                raise CommandError(f"Invalid JSON: {e}") from e
            return list(actions)

        actions = []
        for line_number, line in enumerate(stripped.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                actions.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise CommandError(f"Invalid JSON on line {line_number}: {e}") from e
        return actions
