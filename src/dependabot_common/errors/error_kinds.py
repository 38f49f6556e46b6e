"""Canonical error kinds for dependency update failures."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """One stable value per taxonomy variant; part of the serialized contract."""

    OUT_OF_DISK = "out_of_disk"
    OUT_OF_MEMORY = "out_of_memory"
    NOT_IMPLEMENTED = "not_implemented"

    # Repo level
    DIRECTORY_NOT_FOUND = "directory_not_found"
    BRANCH_NOT_FOUND = "branch_not_found"
    REPO_NOT_FOUND = "repo_not_found"

    # File level
    TOOL_VERSION_NOT_SUPPORTED = "tool_version_not_supported"
    DEPENDENCY_FILE_NOT_FOUND = "dependency_file_not_found"
    DEPENDENCY_FILE_NOT_PARSEABLE = "dependency_file_not_parseable"
    DEPENDENCY_FILE_NOT_EVALUATABLE = "dependency_file_not_evaluatable"
    DEPENDENCY_FILE_NOT_RESOLVABLE = "dependency_file_not_resolvable"

    # Config file
    CONFIG_FILE_NOT_FOUND = "config_file_not_found"

    # Source level
    PRIVATE_SOURCE_AUTHENTICATION_FAILURE = "private_source_authentication_failure"
    PRIVATE_SOURCE_TIMED_OUT = "private_source_timed_out"
    PRIVATE_SOURCE_CERTIFICATE_FAILURE = "private_source_certificate_failure"
    MISSING_ENVIRONMENT_VARIABLE = "missing_environment_variable"
    INCONSISTENT_REGISTRY_RESPONSE = "inconsistent_registry_response"

    # Dependency level
    GIT_DEPENDENCIES_NOT_REACHABLE = "git_dependencies_not_reachable"
    GIT_DEPENDENCY_REFERENCE_NOT_FOUND = "git_dependency_reference_not_found"
    PATH_DEPENDENCIES_NOT_REACHABLE = "path_dependencies_not_reachable"
    GO_MODULE_PATH_MISMATCH = "go_module_path_mismatch"
    ALL_VERSIONS_IGNORED = "all_versions_ignored"
    UNEXPECTED_EXTERNAL_CODE = "unexpected_external_code"


_KIND_GROUPS: dict[ErrorKind, str] = {
    ErrorKind.OUT_OF_DISK: "RESOURCE",
    ErrorKind.OUT_OF_MEMORY: "RESOURCE",
    ErrorKind.NOT_IMPLEMENTED: "INTERNAL",
    ErrorKind.DIRECTORY_NOT_FOUND: "REPO",
    ErrorKind.BRANCH_NOT_FOUND: "REPO",
    ErrorKind.REPO_NOT_FOUND: "REPO",
    ErrorKind.TOOL_VERSION_NOT_SUPPORTED: "FILE",
    ErrorKind.DEPENDENCY_FILE_NOT_FOUND: "FILE",
    ErrorKind.DEPENDENCY_FILE_NOT_PARSEABLE: "FILE",
    ErrorKind.DEPENDENCY_FILE_NOT_EVALUATABLE: "FILE",
    ErrorKind.DEPENDENCY_FILE_NOT_RESOLVABLE: "FILE",
    ErrorKind.CONFIG_FILE_NOT_FOUND: "CONFIG",
    ErrorKind.PRIVATE_SOURCE_AUTHENTICATION_FAILURE: "SOURCE",
    ErrorKind.PRIVATE_SOURCE_TIMED_OUT: "SOURCE",
    ErrorKind.PRIVATE_SOURCE_CERTIFICATE_FAILURE: "SOURCE",
    ErrorKind.MISSING_ENVIRONMENT_VARIABLE: "SOURCE",
    ErrorKind.INCONSISTENT_REGISTRY_RESPONSE: "SOURCE",
    ErrorKind.GIT_DEPENDENCIES_NOT_REACHABLE: "DEPENDENCY",
    ErrorKind.GIT_DEPENDENCY_REFERENCE_NOT_FOUND: "DEPENDENCY",
    ErrorKind.PATH_DEPENDENCIES_NOT_REACHABLE: "DEPENDENCY",
    ErrorKind.GO_MODULE_PATH_MISMATCH: "DEPENDENCY",
    ErrorKind.ALL_VERSIONS_IGNORED: "DEPENDENCY",
    ErrorKind.UNEXPECTED_EXTERNAL_CODE: "INTERNAL",
}


def parse_error_kind(value: Any, *, fallback: Optional[ErrorKind] = None) -> Optional[ErrorKind]:
    """Parse string-like values to `ErrorKind` with safe fallback."""
    if isinstance(value, ErrorKind):
        return value
    if value is None:
        return fallback
    try:
        return ErrorKind(str(value).strip().lower())
    except ValueError:
        return fallback


def error_kind_group(value: Any) -> str:
    """Return a stable coarse grouping for log and telemetry dimensions."""
    parsed = parse_error_kind(value)
    if parsed is None:
        return "INTERNAL"
    return _KIND_GROUPS[parsed]
