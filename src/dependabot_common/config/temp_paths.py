"""Temp-directory naming convention used by the update sandbox.

The sandbox allocates scratch directories as ``<dir_path>/<file_prefix><random>``.
Those paths leak into tool output and are collapsed by the message sanitizer,
so the sanitizer only needs the naming convention, not the allocator itself.

Overrides:
- DEPENDABOT_TMP_DIR_PATH: root directory for scratch paths (default "tmp")
- DEPENDABOT_TMP_FILE_PREFIX: prefix of each scratch directory (default "dependabot_")
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dependabot_common.config.env import get_env_str

logger = logging.getLogger(__name__)

DEFAULT_TMP_DIR_PATH = "tmp"
DEFAULT_TMP_FILE_PREFIX = "dependabot_"

TMP_DIR_PATH_ENV = "DEPENDABOT_TMP_DIR_PATH"
TMP_FILE_PREFIX_ENV = "DEPENDABOT_TMP_FILE_PREFIX"


class TempPathConfig(BaseModel):
    """Naming convention of sandbox scratch directories."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    dir_path: str = Field(DEFAULT_TMP_DIR_PATH, description="Root of scratch directories")
    file_prefix: str = Field(DEFAULT_TMP_FILE_PREFIX, description="Scratch directory prefix")

    @field_validator("dir_path", "file_prefix")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("temp path settings must not be blank")
        return value

    @classmethod
    def from_env(cls) -> "TempPathConfig":
        """Build the config from environment overrides."""
        dir_path = get_env_str(TMP_DIR_PATH_ENV, DEFAULT_TMP_DIR_PATH)
        file_prefix = get_env_str(TMP_FILE_PREFIX_ENV, DEFAULT_TMP_FILE_PREFIX)
        if dir_path != DEFAULT_TMP_DIR_PATH or file_prefix != DEFAULT_TMP_FILE_PREFIX:
            logger.debug(
                "Using temp path override dir_path=%s file_prefix=%s", dir_path, file_prefix
            )
        return cls(dir_path=dir_path, file_prefix=file_prefix)


@lru_cache(maxsize=1)
def get_temp_path_config() -> TempPathConfig:
    """Return the process-wide temp path config (read once)."""
    return TempPathConfig.from_env()


@lru_cache(maxsize=8)
def temp_path_pattern(config: TempPathConfig) -> re.Pattern[str]:
    """Pattern matching any scratch directory allocated under ``config``."""
    return re.compile(
        re.escape(config.dir_path) + "/" + re.escape(config.file_prefix) + "[a-zA-Z0-9-]*"
    )
