"""Typed environment variable parsing helpers."""

import os
from typing import Optional


def get_env_str(name: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    """Get an environment variable as a string."""
    value = os.getenv(name)
    if value is None:
        if required:
            raise KeyError(f"Environment variable '{name}' is required but not set.")
        return default
    return value
