"""Recursive redaction for structured side-channel payloads."""

from typing import Any

from dependabot_common.sanitization.text import sanitize_message


def redact_recursive(value: Any) -> Any:
    """Recursively sanitize every string inside nested lists, tuples and dicts."""
    if isinstance(value, str):
        return sanitize_message(value)
    if isinstance(value, list):
        return [redact_recursive(item) for item in value]
    if isinstance(value, tuple):
        return tuple(redact_recursive(item) for item in value)
    if isinstance(value, dict):
        return {key: redact_recursive(item) for key, item in value.items()}
    return value
