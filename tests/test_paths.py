"""Tests for ConfigPaths — settings directory and file resolution."""

from __future__ import annotations

import stat
from pathlib import Path

import platformdirs
import pytest

from fsearch_settings.infrastructure.config.paths import (
    CONFIG_FILE_NAME,
    CONFIG_FOLDER_NAME,
    ConfigPaths,
)


class TestResolve:
    """Path computation never touches the filesystem."""

    def test_default_names(self, tmp_path: Path) -> None:
        paths = ConfigPaths(config_root=tmp_path)
        assert CONFIG_FOLDER_NAME == "fsearch"
        assert CONFIG_FILE_NAME == "fsearch.conf"
        assert paths.resolve_dir() == tmp_path / "fsearch"
        assert paths.resolve_path() == tmp_path / "fsearch" / "fsearch.conf"
        assert not paths.config_dir.exists()

    def test_properties_match_resolvers(self, tmp_path: Path) -> None:
        paths = ConfigPaths(config_root=tmp_path)
        assert paths.config_dir == paths.resolve_dir()
        assert paths.config_path == paths.resolve_path()

    def test_custom_names(self, tmp_path: Path) -> None:
        paths = ConfigPaths(str(tmp_path), folder_name="app", file_name="app.ini")
        assert paths.config_path == tmp_path / "app" / "app.ini"

    def test_platform_config_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(platformdirs, "user_config_dir", lambda *a, **k: str(tmp_path))
        assert ConfigPaths().config_path == tmp_path / "fsearch" / "fsearch.conf"


class TestEnsureConfigDir:
    """Directory creation is explicit and idempotent."""

    def test_creates_nested_directory(self, tmp_path: Path) -> None:
        paths = ConfigPaths(config_root=tmp_path / "a" / "b")
        assert paths.ensure_config_dir() is True
        assert paths.config_dir.is_dir()
        assert stat.S_IMODE(paths.config_dir.stat().st_mode) & 0o077 == 0

    def test_idempotent(self, tmp_path: Path) -> None:
        paths = ConfigPaths(config_root=tmp_path)
        assert paths.ensure_config_dir() is True
        assert paths.ensure_config_dir() is True

    def test_blocked_by_file(self, tmp_path: Path) -> None:
        (tmp_path / "fsearch").write_text("not a directory", encoding="utf-8")
        assert ConfigPaths(config_root=tmp_path).ensure_config_dir() is False
