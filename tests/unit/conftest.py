"""Unit test environment helpers."""

import pytest

from dependabot_common.config.temp_paths import get_temp_path_config


@pytest.fixture(autouse=True)
def _default_temp_paths(monkeypatch):
    """Pin the scratch directory convention to its defaults for every test."""
    monkeypatch.delenv("DEPENDABOT_TMP_DIR_PATH", raising=False)
    monkeypatch.delenv("DEPENDABOT_TMP_FILE_PREFIX", raising=False)
    get_temp_path_config.cache_clear()
    yield
    get_temp_path_config.cache_clear()
