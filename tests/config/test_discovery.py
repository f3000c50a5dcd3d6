"""Tests for bbmark.toml discovery and loading."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from bbmark.config.discovery import CONFIG_ENV_VAR, find_config, load_config


@pytest.fixture(autouse=True)
def _no_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_found_in_start_dir(self, tmp_path: Path) -> None:
        config = tmp_path / "bbmark.toml"
        config.write_text("")
        assert find_config(tmp_path) == config

    def test_walks_up(self, tmp_path: Path) -> None:
        config = tmp_path / "bbmark.toml"
        config.write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == config

    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "elsewhere.toml"
        config.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
        assert find_config(tmp_path / "nowhere") == config

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "bbmark.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_returns_raw_sections(self, tmp_path: Path) -> None:
        path = tmp_path / "bbmark.toml"
        path.write_text('[engine]\ndisabled_rules = ["youtube"]\n[excerpt]\nlength = 80\n')
        data = load_config(path)
        assert data == {"engine": {"disabled_rules": ["youtube"]}, "excerpt": {"length": 80}}

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bbmark.toml"
        path.write_text("")
        assert load_config(path) == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "bbmark.toml"
        path.write_text("[engine\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            load_config(path)
