"""Sanitization utilities."""

from .bounding import redact_recursive
from .text import (
    REDACTED_TOKEN,
    TMP_DIR_TOKEN,
    filter_sensitive_data,
    sanitize_message,
    sanitize_source,
)

__all__ = [
    "REDACTED_TOKEN",
    "TMP_DIR_TOKEN",
    "filter_sensitive_data",
    "redact_recursive",
    "sanitize_message",
    "sanitize_source",
]
