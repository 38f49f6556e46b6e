"""Shared error taxonomy and message sanitization for dependency updates."""
