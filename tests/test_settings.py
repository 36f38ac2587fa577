"""Tests for settings loading."""

import json
import logging
from pathlib import Path

import pytest

from envolvente.core import settings as settings_mod
from envolvente.core.settings import (
    EnvolventeSettings,
    find_project_settings_path,
    get_settings,
    load_project_settings,
    load_settings,
)


def _write_settings(directory: Path, data: object) -> Path:
    p = directory / "envolvente_settings.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


class TestProjectSettingsFile:
    """Tests for locating and reading envolvente_settings.json."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert find_project_settings_path(tmp_path) is None
        assert load_settings(tmp_path) == EnvolventeSettings()

    def test_found_in_parent_directory(self, tmp_path: Path) -> None:
        p = _write_settings(tmp_path, {"geom": {"strict_direction": True}})
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_project_settings_path(nested) == p.resolve()
        assert load_settings(nested).strict_direction is True

    def test_invalid_json_is_ignored(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / "envolvente_settings.json").write_text("{nope", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            assert load_project_settings(tmp_path) == {}
        assert "No se pudo leer" in caplog.text

    def test_non_object_root_is_ignored(self, tmp_path: Path) -> None:
        _write_settings(tmp_path, [1, 2, 3])
        assert load_project_settings(tmp_path) == {}

    def test_all_keys(self, tmp_path: Path) -> None:
        _write_settings(
            tmp_path,
            {
                "geom": {"strict_direction": "yes"},
                "bbox": {"tol_abs": 0.01, "warn_abs": 0.1},
                "log": {"level": "debug"},
            },
        )
        s = load_settings(tmp_path)
        assert s == EnvolventeSettings(strict_direction=True, bbox_tol_abs=0.01, bbox_warn_abs=0.1, log_level="DEBUG")

    def test_invalid_values_keep_defaults(self, tmp_path: Path) -> None:
        _write_settings(
            tmp_path,
            {
                "geom": {"strict_direction": "maybe"},
                "bbox": {"tol_abs": -1, "warn_abs": True},
                "log": {"level": "LOUD"},
            },
        )
        assert load_settings(tmp_path) == EnvolventeSettings()

    def test_warn_never_below_tol(self, tmp_path: Path) -> None:
        _write_settings(tmp_path, {"bbox": {"tol_abs": 0.5, "warn_abs": 0.1}})
        s = load_settings(tmp_path)
        assert s.bbox_tol_abs == 0.5
        assert s.bbox_warn_abs == 0.5


class TestEnvironmentOverrides:
    """Tests for ENVOLVENTE_* environment variables."""

    def test_env_wins_by_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_settings(tmp_path, {"geom": {"strict_direction": True}})
        monkeypatch.setenv(settings_mod.ENV_STRICT_DIRECTION, "0")

        assert load_settings(tmp_path).strict_direction is False

    def test_json_wins_when_prefer_env_is_false(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_settings(tmp_path, {"geom": {"strict_direction": True}})
        monkeypatch.setenv(settings_mod.ENV_STRICT_DIRECTION, "0")

        assert load_settings(tmp_path, prefer_env=False).strict_direction is True

    def test_env_fills_missing_json_keys(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_settings(tmp_path, {"geom": {"strict_direction": True}})
        monkeypatch.setenv(settings_mod.ENV_BBOX_TOL, "0.25")

        s = load_settings(tmp_path, prefer_env=False)
        assert s.strict_direction is True
        assert s.bbox_tol_abs == 0.25

    def test_invalid_env_is_ignored(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv(settings_mod.ENV_BBOX_TOL, "abc")

        with caplog.at_level(logging.WARNING):
            s = load_settings(tmp_path)
        assert s.bbox_tol_abs == EnvolventeSettings().bbox_tol_abs
        assert settings_mod.ENV_BBOX_TOL in caplog.text


class TestSettingsCache:
    """Tests for get_settings() caching."""

    def test_cached_until_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv(settings_mod.ENV_LOG_LEVEL, "ERROR")

        assert get_settings() is first

        settings_mod.reset_settings_cache()
        assert get_settings().log_level == "ERROR"
