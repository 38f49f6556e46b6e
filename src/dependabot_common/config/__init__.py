"""Process-wide configuration helpers."""

from dependabot_common.config.temp_paths import TempPathConfig, get_temp_path_config

__all__ = ["TempPathConfig", "get_temp_path_config"]
