"""Sanitization helpers for text that bypassed the taxonomy."""

from __future__ import annotations

from typing import Any

from dependabot_common.errors.exceptions import DependabotException
from dependabot_common.sanitization.text import sanitize_message

DEFAULT_FALLBACK = "Update failed."


def sanitize_error_message(message: Any, *, fallback: str = DEFAULT_FALLBACK) -> str:
    """Return safe error text for any value, falling back when nothing is left."""
    if message is None:
        return fallback
    raw_text = message if isinstance(message, str) else str(message)
    safe_text = sanitize_message(raw_text)
    return safe_text or fallback


def sanitize_exception(exc: BaseException, *, fallback: str = DEFAULT_FALLBACK) -> str:
    """Sanitize an exception raised by an HTTP client, a subprocess or other tooling."""
    if isinstance(exc, DependabotException):
        return str(exc.error) or fallback
    return sanitize_error_message(str(exc), fallback=fallback)
