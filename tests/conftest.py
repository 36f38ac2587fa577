"""Shared test fixtures."""

from pathlib import Path

import pytest

from envolvente.core import settings as settings_mod
from envolvente.geom import path_elements
from envolvente.utils import log as log_mod


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every test from an empty directory with no ENVOLVENTE_* overrides.

    Also keeps the CLI from attaching root handlers during tests.
    """
    for key in (
        settings_mod.ENV_STRICT_DIRECTION,
        settings_mod.ENV_BBOX_TOL,
        settings_mod.ENV_BBOX_WARN,
        settings_mod.ENV_LOG_LEVEL,
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(log_mod, "_LOGGER_CONFIGURED", True)
    monkeypatch.setattr(path_elements, "_ZERO_DIRECTION_WARNED", False)
    settings_mod.reset_settings_cache()
    yield
    settings_mod.reset_settings_cache()


@pytest.fixture
def strict_direction(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable strict_direction through the environment."""
    monkeypatch.setenv(settings_mod.ENV_STRICT_DIRECTION, "1")
    settings_mod.reset_settings_cache()
