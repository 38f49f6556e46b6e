"""Raisable carrier for taxonomy errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dependabot_common.errors.error_kinds import ErrorKind
    from dependabot_common.models.dependabot_errors import DependabotErrorBase


class DependabotException(Exception):
    """Carries one immutable taxonomy error up the stack.

    Failure sites raise ``error.as_exception()``; handlers inspect ``exc.error``
    (or match on it) to decide whether to retry, abort or report.
    """

    def __init__(self, error: "DependabotErrorBase") -> None:
        self.error = error
        super().__init__(str(error))

    @property
    def kind(self) -> "ErrorKind":
        return self.error.error_kind
