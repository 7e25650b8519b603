"""Redaction of result values before they are written to logs."""

from __future__ import annotations

import re
from typing import Any

from django_result_store.conf.settings import get_settings

DEFAULT_SENSITIVE_PATTERNS = [
    re.compile(r"password", re.IGNORECASE),
    re.compile(r"secret", re.IGNORECASE),
    re.compile(r"token", re.IGNORECASE),
    re.compile(r"api_?key", re.IGNORECASE),
    re.compile(r"auth", re.IGNORECASE),
    re.compile(r"credential", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"
RECURSIVE_VALUE = "<recursive>"
OMITTED_VALUE = "<omitted>"


def is_sensitive_key(key: str) -> bool:
    """Check if a mapping key names sensitive data.

    String entries in ``REDACT_PATTERNS`` match as case-insensitive
    substrings, compiled patterns with ``search``.
    """
    patterns = get_settings().get("REDACT_PATTERNS") or DEFAULT_SENSITIVE_PATTERNS

    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            if pattern.search(key):
                return True
        elif isinstance(pattern, str):
            if pattern.lower() in key.lower():
                return True
    return False


def redact(value: Any, _active: frozenset[int] = frozenset()) -> Any:
    """Return a copy of ``value`` with sensitive mapping entries masked.

    Dicts, lists and tuples are walked recursively. A container that
    contains itself is rendered as ``RECURSIVE_VALUE`` at the point it
    repeats. Other values are returned as they are.
    """
    if not isinstance(value, (dict, list, tuple)):
        return value
    if id(value) in _active:
        return RECURSIVE_VALUE

    active = _active | {id(value)}
    if isinstance(value, dict):
        return {
            key: REDACTED_VALUE if is_sensitive_key(str(key)) else redact(item, active)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact(item, active) for item in value]
    return tuple(redact(item, active) for item in value)


def describe_value(value: Any) -> str:
    """Render a value for a log line: redacted and length-limited."""
    settings = get_settings()
    if not settings["LOG_VALUES"]:
        return OMITTED_VALUE

    text = repr(redact(value))
    max_length = settings["LOG_VALUE_MAX_LENGTH"]
    if len(text) > max_length:
        text = text[:max_length] + "..."
    return text
