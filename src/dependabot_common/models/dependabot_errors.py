"""Dependency update error taxonomy.

Every failure surfaced by an update job is one variant of the closed
``DependabotError`` union. Variants are immutable and carry only their own
fields; the ``kind`` field discriminates between them so consumers can match
exhaustively:

    match error:
        case PrivateSourceTimedOut(source=source):
            retry(source)
        case OutOfDisk():
            abort()

Messages are sanitized when the variant is built, whether through its
constructor or through ``parse_dependabot_error``: scratch paths collapse to
``dependabot_tmp_dir`` and URL credentials are erased. Source fields are also
stripped of provider path tokens.
"""

from __future__ import annotations

import re
from typing import (
    TYPE_CHECKING,
    Annotated,
    Any,
    Callable,
    Literal,
    Mapping,
    Optional,
    Sequence,
    Union,
    get_args,
)

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from dependabot_common.errors.error_kinds import ErrorKind, error_kind_group
from dependabot_common.models.source import Source
from dependabot_common.sanitization.text import (
    filter_sensitive_data,
    sanitize_message,
    sanitize_source,
)

if TYPE_CHECKING:
    from dependabot_common.errors.exceptions import DependabotException


def _flatten(values: Any) -> list[str]:
    if isinstance(values, str):
        return [values]
    if not isinstance(values, (list, tuple)):
        raise ValueError(f"expected a string or a list of strings, got {type(values).__name__}")
    flat: list[str] = []
    for value in values:
        flat.extend(_flatten(value))
    return flat


def _sanitize_each(values: Any, sanitize: Callable[[str], str]) -> tuple[str, ...]:
    return tuple(sanitize(value) for value in _flatten(values))


def _path_segments(file_path: str) -> list[str]:
    segments = file_path.split("/")
    while segments and segments[-1] == "":
        segments.pop()
    return segments


class DependabotErrorBase(BaseModel):
    """Shared shape of every taxonomy variant."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: str
    message: Optional[str] = Field(None, description="Sanitized human-readable message")

    @field_validator("message", mode="before")
    @classmethod
    def _sanitize_message(cls, value: Any) -> Any:
        if isinstance(value, re.Match):
            value = value.group(0)
        return sanitize_message(value)

    @property
    def error_kind(self) -> ErrorKind:
        return ErrorKind(self.kind)

    @property
    def group(self) -> str:
        return error_kind_group(self.kind)

    def __str__(self) -> str:
        return self.message if self.message is not None else self.kind

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logs, reports and telemetry."""
        return self.model_dump(mode="json", exclude_none=True)

    def as_exception(self) -> "DependabotException":
        """Wrap this error so it can be raised at the failure site."""
        from dependabot_common.errors.exceptions import DependabotException

        return DependabotException(self)


class _MessageOnlyError(DependabotErrorBase):
    def __init__(self, message: Optional[str] = None, **data: Any) -> None:
        super().__init__(message=message, **data)


class OutOfDisk(_MessageOnlyError):
    kind: Literal["out_of_disk"] = ErrorKind.OUT_OF_DISK.value


class OutOfMemory(_MessageOnlyError):
    kind: Literal["out_of_memory"] = ErrorKind.OUT_OF_MEMORY.value


class NotImplemented(_MessageOnlyError):  # noqa: A001
    kind: Literal["not_implemented"] = ErrorKind.NOT_IMPLEMENTED.value


#####################
# Repo level errors #
#####################


class DirectoryNotFound(DependabotErrorBase):
    kind: Literal["directory_not_found"] = ErrorKind.DIRECTORY_NOT_FOUND.value
    directory_name: str

    def __init__(self, directory_name: str, message: Optional[str] = None, **data: Any) -> None:
        super().__init__(directory_name=directory_name, message=message, **data)


class BranchNotFound(DependabotErrorBase):
    kind: Literal["branch_not_found"] = ErrorKind.BRANCH_NOT_FOUND.value
    branch_name: str

    def __init__(self, branch_name: str, message: Optional[str] = None, **data: Any) -> None:
        super().__init__(branch_name=branch_name, message=message, **data)


class RepoNotFound(DependabotErrorBase):
    kind: Literal["repo_not_found"] = ErrorKind.REPO_NOT_FOUND.value
    source: Union[Source, str]

    def __init__(
        self, source: Union[Source, str], message: Optional[str] = None, **data: Any
    ) -> None:
        super().__init__(source=source, message=message, **data)

    @field_validator("source")
    @classmethod
    def _sanitize_source(cls, value: Union[Source, str]) -> Union[Source, str]:
        if isinstance(value, str):
            return sanitize_source(value)
        return value


#####################
# File level errors #
#####################


class ToolVersionNotSupported(DependabotErrorBase):
    kind: Literal["tool_version_not_supported"] = ErrorKind.TOOL_VERSION_NOT_SUPPORTED.value
    tool_name: str
    detected_version: str
    supported_versions: str

    def __init__(
        self, tool_name: str, detected_version: str, supported_versions: str, **data: Any
    ) -> None:
        data.setdefault(
            "message",
            f"Dependabot detected the following {tool_name} requirement for your project: "
            f"'{detected_version}'.\n\nCurrently, the following {tool_name} versions are "
            f"supported in Dependabot: {supported_versions}.",
        )
        super().__init__(
            tool_name=tool_name,
            detected_version=detected_version,
            supported_versions=supported_versions,
            **data,
        )


class _DependencyFileError(DependabotErrorBase):
    file_path: str

    @property
    def file_name(self) -> str:
        segments = _path_segments(self.file_path)
        if not segments:
            raise AssertionError(f"file_path has no segments: {self.file_path!r}")
        return segments[-1]

    @property
    def directory(self) -> str:
        segments = _path_segments(self.file_path)
        if not segments:
            raise AssertionError(f"file_path has no segments: {self.file_path!r}")
        # Directory should always start with a `/`
        return re.sub(r"^/*", "/", "/".join(segments[:-1]), count=1)


class DependencyFileNotFound(_DependencyFileError):
    kind: Literal["dependency_file_not_found"] = ErrorKind.DEPENDENCY_FILE_NOT_FOUND.value

    def __init__(self, file_path: str, message: Optional[str] = None, **data: Any) -> None:
        super().__init__(
            file_path=file_path,
            message=message if message is not None else f"{file_path} not found",
            **data,
        )


class DependencyFileNotParseable(_DependencyFileError):
    kind: Literal["dependency_file_not_parseable"] = (
        ErrorKind.DEPENDENCY_FILE_NOT_PARSEABLE.value
    )

    def __init__(self, file_path: str, message: Optional[str] = None, **data: Any) -> None:
        super().__init__(
            file_path=file_path,
            message=message if message is not None else f"{file_path} not parseable",
            **data,
        )


class DependencyFileNotEvaluatable(_MessageOnlyError):
    kind: Literal["dependency_file_not_evaluatable"] = (
        ErrorKind.DEPENDENCY_FILE_NOT_EVALUATABLE.value
    )


class DependencyFileNotResolvable(_MessageOnlyError):
    kind: Literal["dependency_file_not_resolvable"] = (
        ErrorKind.DEPENDENCY_FILE_NOT_RESOLVABLE.value
    )


######################
# Config file errors #
######################


class ConfigFileFileNotFound(_MessageOnlyError):
    kind: Literal["config_file_not_found"] = ErrorKind.CONFIG_FILE_NOT_FOUND.value


#######################
# Source level errors #
#######################


class _PrivateSourceError(DependabotErrorBase):
    source: str

    @field_validator("source")
    @classmethod
    def _sanitize_source(cls, value: str) -> str:
        return sanitize_source(value)


class PrivateSourceAuthenticationFailure(_PrivateSourceError):
    kind: Literal["private_source_authentication_failure"] = (
        ErrorKind.PRIVATE_SOURCE_AUTHENTICATION_FAILURE.value
    )

    def __init__(self, source: str, **data: Any) -> None:
        source = sanitize_source(source)
        data.setdefault(
            "message",
            "The following source could not be reached as it requires authentication "
            "(and any provided details were invalid or lacked the required permissions): "
            f"{source}",
        )
        super().__init__(source=source, **data)


class PrivateSourceTimedOut(_PrivateSourceError):
    kind: Literal["private_source_timed_out"] = ErrorKind.PRIVATE_SOURCE_TIMED_OUT.value

    def __init__(self, source: str, **data: Any) -> None:
        source = sanitize_source(source)
        data.setdefault("message", f"The following source timed out: {source}")
        super().__init__(source=source, **data)


class PrivateSourceCertificateFailure(_PrivateSourceError):
    kind: Literal["private_source_certificate_failure"] = (
        ErrorKind.PRIVATE_SOURCE_CERTIFICATE_FAILURE.value
    )

    def __init__(self, source: str, **data: Any) -> None:
        source = sanitize_source(source)
        data.setdefault("message", f"Could not verify the SSL certificate for {source}")
        super().__init__(source=source, **data)


class MissingEnvironmentVariable(DependabotErrorBase):
    kind: Literal["missing_environment_variable"] = ErrorKind.MISSING_ENVIRONMENT_VARIABLE.value
    environment_variable: str

    def __init__(self, environment_variable: str, **data: Any) -> None:
        data.setdefault("message", f"Missing environment variable {environment_variable}")
        super().__init__(environment_variable=environment_variable, **data)


# Useful for JS file updaters, where the registry API sometimes returns
# different results to the actual update process
class InconsistentRegistryResponse(_MessageOnlyError):
    kind: Literal["inconsistent_registry_response"] = (
        ErrorKind.INCONSISTENT_REGISTRY_RESPONSE.value
    )


###########################
# Dependency level errors #
###########################


class GitDependenciesNotReachable(DependabotErrorBase):
    kind: Literal["git_dependencies_not_reachable"] = (
        ErrorKind.GIT_DEPENDENCIES_NOT_REACHABLE.value
    )
    dependency_urls: tuple[str, ...]

    def __init__(self, dependency_urls: Union[str, Sequence[str]], **data: Any) -> None:
        try:
            urls = _sanitize_each(dependency_urls, filter_sensitive_data)
        except ValueError:
            # field validation rejects it again as a ValidationError
            urls = dependency_urls
        else:
            data.setdefault(
                "message", f"The following git URLs could not be retrieved: {', '.join(urls)}"
            )
        super().__init__(dependency_urls=urls, **data)

    @field_validator("dependency_urls", mode="before")
    @classmethod
    def _sanitize_urls(cls, value: Any) -> tuple[str, ...]:
        return _sanitize_each(value, filter_sensitive_data)


class GitDependencyReferenceNotFound(DependabotErrorBase):
    kind: Literal["git_dependency_reference_not_found"] = (
        ErrorKind.GIT_DEPENDENCY_REFERENCE_NOT_FOUND.value
    )
    dependency: str

    def __init__(self, dependency: str, **data: Any) -> None:
        data.setdefault(
            "message",
            f"The branch or reference specified for {dependency} could not be retrieved",
        )
        super().__init__(dependency=dependency, **data)


class PathDependenciesNotReachable(DependabotErrorBase):
    kind: Literal["path_dependencies_not_reachable"] = (
        ErrorKind.PATH_DEPENDENCIES_NOT_REACHABLE.value
    )
    dependencies: tuple[str, ...]

    def __init__(self, dependencies: Union[str, Sequence[str]], **data: Any) -> None:
        try:
            paths = _sanitize_each(dependencies, sanitize_message)
        except ValueError:
            # field validation rejects it again as a ValidationError
            paths = dependencies
        else:
            data.setdefault(
                "message",
                "The following path based dependencies could not be retrieved: "
                f"{', '.join(paths)}",
            )
        super().__init__(dependencies=paths, **data)

    @field_validator("dependencies", mode="before")
    @classmethod
    def _sanitize_dependencies(cls, value: Any) -> tuple[str, ...]:
        return _sanitize_each(value, sanitize_message)


class GoModulePathMismatch(DependabotErrorBase):
    kind: Literal["go_module_path_mismatch"] = ErrorKind.GO_MODULE_PATH_MISMATCH.value
    go_mod: str
    declared_path: str
    discovered_path: str

    def __init__(self, go_mod: str, declared_path: str, discovered_path: str, **data: Any) -> None:
        data.setdefault(
            "message",
            f"The module path '{declared_path}' found in {go_mod} doesn't match the actual "
            f"path '{discovered_path}' in the dependency's go.mod",
        )
        super().__init__(
            go_mod=go_mod, declared_path=declared_path, discovered_path=discovered_path, **data
        )


# Raised by update checkers if all candidate updates are ignored
class AllVersionsIgnored(_MessageOnlyError):
    kind: Literal["all_versions_ignored"] = ErrorKind.ALL_VERSIONS_IGNORED.value


# Raised by file parsers if processing may execute external code in the update context
class UnexpectedExternalCode(_MessageOnlyError):
    kind: Literal["unexpected_external_code"] = ErrorKind.UNEXPECTED_EXTERNAL_CODE.value


DependabotError = Annotated[
    Union[
        OutOfDisk,
        OutOfMemory,
        NotImplemented,
        DirectoryNotFound,
        BranchNotFound,
        RepoNotFound,
        ToolVersionNotSupported,
        DependencyFileNotFound,
        DependencyFileNotParseable,
        DependencyFileNotEvaluatable,
        DependencyFileNotResolvable,
        ConfigFileFileNotFound,
        PrivateSourceAuthenticationFailure,
        PrivateSourceTimedOut,
        PrivateSourceCertificateFailure,
        MissingEnvironmentVariable,
        InconsistentRegistryResponse,
        GitDependenciesNotReachable,
        GitDependencyReferenceNotFound,
        PathDependenciesNotReachable,
        GoModulePathMismatch,
        AllVersionsIgnored,
        UnexpectedExternalCode,
    ],
    Field(discriminator="kind"),
]

_ERROR_ADAPTER: TypeAdapter[DependabotError] = TypeAdapter(DependabotError)

ERROR_VARIANTS: dict[ErrorKind, type[DependabotErrorBase]] = {
    ErrorKind(variant.model_fields["kind"].default): variant
    for variant in get_args(get_args(DependabotError)[0])
}


def parse_dependabot_error(payload: Mapping[str, Any]) -> DependabotErrorBase:
    """Rebuild a variant from its serialized form, re-applying sanitization."""
    return _ERROR_ADAPTER.validate_python(dict(payload))
