"""Error taxonomy helpers."""

from dependabot_common.errors.error_kinds import ErrorKind, error_kind_group, parse_error_kind
from dependabot_common.errors.exceptions import DependabotException
from dependabot_common.errors.sanitization import sanitize_error_message, sanitize_exception

__all__ = [
    "DependabotException",
    "ErrorKind",
    "error_kind_group",
    "parse_error_kind",
    "sanitize_error_message",
    "sanitize_exception",
]
