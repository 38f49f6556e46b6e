"""Repository source model."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dependabot_common.sanitization.text import filter_sensitive_data

DEFAULT_HOSTNAMES: dict[str, str] = {
    "github": "github.com",
    "gitlab": "gitlab.com",
    "bitbucket": "bitbucket.org",
    "azure": "dev.azure.com",
}


class Source(BaseModel):
    """Where a repository lives and which part of it an update job targets."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    provider: str = Field(..., description="Hosting provider (github, gitlab, ...)")
    repo: str = Field(..., description="Repository name, e.g. 'org/project'")
    directory: Optional[str] = Field(None, description="Directory of the manifests")
    branch: Optional[str] = Field(None, description="Target branch")
    hostname: Optional[str] = Field(None, description="Host for self-hosted providers")
    api_endpoint: Optional[str] = Field(None, description="API endpoint for self-hosted providers")

    @field_validator("api_endpoint")
    @classmethod
    def _strip_credentials(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return filter_sensitive_data(value)

    @property
    def resolved_hostname(self) -> str:
        return self.hostname or DEFAULT_HOSTNAMES.get(self.provider, self.provider)

    @property
    def url(self) -> str:
        """Browser URL of the repository."""
        return f"https://{self.resolved_hostname}/{self.repo}"

    def __str__(self) -> str:
        return self.url
