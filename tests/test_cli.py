"""Tests for the Typer CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from fsearch_settings.domain.models.settings import Settings, build_defaults
from fsearch_settings.infrastructure.config.settings_store import (
    load_settings,
    save_settings,
)
from fsearch_settings.presentation.cli.app import app

runner = CliRunner()


@pytest.fixture()
def root(tmp_path: Path) -> Path:
    return tmp_path / "config"


def _conf(root: Path) -> Path:
    return root / "fsearch" / "fsearch.conf"


def _run(root: Path, *args: str):
    return runner.invoke(app, ["--config-root", str(root), *args])


# ---------------------------------------------------------------------------
# path / init / show / validate
# ---------------------------------------------------------------------------


class TestSettingsCommands:
    def test_path(self, root: Path):
        result = _run(root, "path")
        assert result.exit_code == 0
        assert str(_conf(root)) in result.output

    def test_config_root_from_env(self, root: Path):
        result = runner.invoke(app, ["path"], env={"FSEARCH_CONFIG_ROOT": str(root)})
        assert result.exit_code == 0
        assert str(_conf(root)) in result.output

    def test_init_writes_defaults(self, root: Path):
        result = _run(root, "init")
        assert result.exit_code == 0
        loaded = load_settings(_conf(root))
        assert loaded.ok is True
        assert loaded.settings == build_defaults()

    def test_init_refuses_to_overwrite(self, root: Path):
        _conf(root).parent.mkdir(parents=True)
        save_settings(_conf(root), Settings(locations=["/keep"]))

        result = _run(root, "init")
        assert result.exit_code == 1
        assert load_settings(_conf(root)).settings.locations == ["/keep"]

        result = _run(root, "init", "--force")
        assert result.exit_code == 0
        assert load_settings(_conf(root)).settings.locations == []

    def test_show(self, root: Path):
        _run(root, "init")
        result = _run(root, "show")
        assert result.exit_code == 0
        assert "num_results" in result.output
        assert "10000" in result.output

    def test_show_without_file(self, root: Path):
        result = _run(root, "show")
        assert result.exit_code == 1

    def test_validate(self, tmp_path: Path):
        conf = tmp_path / "fsearch.conf"
        conf.write_text("[Search]\nnum_results = lots\n", encoding="utf-8")
        result = runner.invoke(app, ["validate", str(conf)])
        assert result.exit_code == 0
        assert "search.num_results" in result.output

    def test_validate_malformed(self, tmp_path: Path):
        conf = tmp_path / "fsearch.conf"
        conf.write_text("garbage\n", encoding="utf-8")
        result = runner.invoke(app, ["validate", str(conf)])
        assert result.exit_code == 1

    def test_validate_missing(self, tmp_path: Path):
        result = runner.invoke(app, ["validate", str(tmp_path / "nope.conf")])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# location list / add / remove / move
# ---------------------------------------------------------------------------


class TestLocationCommands:
    def test_add_and_list(self, root: Path):
        assert _run(root, "location", "add", "/a").exit_code == 0
        assert _run(root, "location", "add", "/b").exit_code == 0

        result = _run(root, "location", "list")
        assert result.exit_code == 0
        assert "/a" in result.output
        assert "/b" in result.output
        assert load_settings(_conf(root)).settings.locations == ["/a", "/b"]

    def test_remove(self, root: Path):
        _run(root, "location", "add", "/a")
        _run(root, "location", "add", "/b")
        assert _run(root, "location", "remove", "0").exit_code == 0
        assert load_settings(_conf(root)).settings.locations == ["/b"]

    def test_remove_bad_index(self, root: Path):
        _run(root, "location", "add", "/a")
        result = _run(root, "location", "remove", "5")
        assert result.exit_code == 1
        assert load_settings(_conf(root)).settings.locations == ["/a"]

    def test_move(self, root: Path):
        for location in ("/a", "/b", "/c"):
            _run(root, "location", "add", location)
        assert _run(root, "location", "move", "2", "0").exit_code == 0
        assert load_settings(_conf(root)).settings.locations == ["/c", "/a", "/b"]

    def test_broken_file_is_not_overwritten(self, root: Path):
        _conf(root).parent.mkdir(parents=True)
        _conf(root).write_text("not a key file\n", encoding="utf-8")

        result = _run(root, "location", "add", "/a")
        assert result.exit_code == 1
        assert _conf(root).read_text(encoding="utf-8") == "not a key file\n"
