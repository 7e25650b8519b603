"""Settings for django-result-store.

All options live in a single ``DJANGO_RESULT_STORE`` dict in the Django
settings module and are merged over ``DEFAULTS``.
"""

from __future__ import annotations

import re
from typing import Any

from django.conf import settings as django_settings
from django.core.exceptions import ImproperlyConfigured

SETTINGS_NAME = "DJANGO_RESULT_STORE"

BUILTIN_ID_STRATEGIES = ("timestamp", "monotonic", "uuid")

DEFAULTS: dict[str, Any] = {
    "ID_STRATEGY": "timestamp",
    "LOG_VALUES": True,
    "LOG_VALUE_MAX_LENGTH": 200,
    "REDACT_PATTERNS": None,
    "METRICS_ENABLED": True,
}


def get_settings() -> dict[str, Any]:
    """Get the effective settings, user values merged over defaults."""
    user_settings = getattr(django_settings, SETTINGS_NAME, None) or {}
    merged = dict(DEFAULTS)
    merged.update(user_settings)
    return merged


def validate_settings() -> None:
    """Validate the configured settings.

    Raises:
        ImproperlyConfigured: If any setting has an invalid value.
    """
    user_settings = getattr(django_settings, SETTINGS_NAME, None)
    if user_settings is not None and not isinstance(user_settings, dict):
        raise ImproperlyConfigured(f"{SETTINGS_NAME} must be a dict")

    current = get_settings()

    unknown = set(current) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown {SETTINGS_NAME} keys: {', '.join(sorted(unknown))}"
        )

    strategy = current["ID_STRATEGY"]
    if not isinstance(strategy, str) or not strategy:
        raise ImproperlyConfigured("ID_STRATEGY must be a non-empty string")
    if strategy not in BUILTIN_ID_STRATEGIES and "." not in strategy:
        raise ImproperlyConfigured(
            f"ID_STRATEGY must be one of {BUILTIN_ID_STRATEGIES} "
            f"or a dotted path to a callable, got '{strategy}'"
        )

    max_length = current["LOG_VALUE_MAX_LENGTH"]
    if not isinstance(max_length, int) or isinstance(max_length, bool) or max_length < 1:
        raise ImproperlyConfigured("LOG_VALUE_MAX_LENGTH must be a positive integer")

    patterns = current["REDACT_PATTERNS"]
    if patterns is not None:
        if not isinstance(patterns, (list, tuple)):
            raise ImproperlyConfigured("REDACT_PATTERNS must be a list of patterns or None")
        for pattern in patterns:
            if not isinstance(pattern, (str, re.Pattern)):
                raise ImproperlyConfigured(
                    "REDACT_PATTERNS entries must be strings or compiled regexes, "
                    f"got {type(pattern).__name__}"
                )
