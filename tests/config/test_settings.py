"""Tests for BbSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from bbmark.config.settings import BbSettings


class TestDefaults:
    def test_all_defaults(self, workdir: Path) -> None:
        settings = BbSettings.from_cli(start=workdir)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.engine.case_insensitive is False
        assert settings.excerpt.suffix == "..."

    def test_frozen(self, workdir: Path) -> None:
        settings = BbSettings.from_cli(start=workdir)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, workdir: Path) -> None:
        (workdir / "bbmark.toml").write_text("[engine]\ncase_insensitive = true\n")
        settings = BbSettings.from_cli(start=workdir)
        assert settings.engine.case_insensitive is True
        assert settings.config_path == workdir / "bbmark.toml"

    def test_explicit_config_path(self, workdir: Path) -> None:
        custom = workdir / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[excerpt]\nlength = 42\n")
        settings = BbSettings.from_cli(config_path=str(custom))
        assert settings.excerpt.length == 42
        assert settings.config_path == custom

    def test_invalid_toml(self, workdir: Path) -> None:
        (workdir / "bbmark.toml").write_text("[engine\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            BbSettings.from_cli(start=workdir)


class TestPriority:
    def test_env_overrides_toml(self, workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (workdir / "bbmark.toml").write_text("[excerpt]\nlength = 42\n")
        monkeypatch.setenv("BBMARK_EXCERPT__LENGTH", "7")
        settings = BbSettings.from_cli(start=workdir)
        assert settings.excerpt.length == 7

    def test_cli_flags_override_env(self, workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BBMARK_QUIET", "true")
        settings = BbSettings.from_cli(start=workdir, quiet=False)
        assert settings.quiet is False


class TestErrors:
    def test_missing_explicit_config(self, workdir: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            BbSettings.from_cli(config_path=str(workdir / "missing.toml"))

    def test_invalid_value_in_toml(self, workdir: Path) -> None:
        (workdir / "bbmark.toml").write_text("[excerpt]\nlength = 0\n")
        with pytest.raises(click.ClickException, match=r"Invalid configuration: excerpt\.length"):
            BbSettings.from_cli(start=workdir)

    def test_invalid_value_in_env(self, workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BBMARK_ENGINE__MAX_INPUT_LENGTH", "0")
        with pytest.raises(click.ClickException, match="max_input_length"):
            BbSettings.from_cli(start=workdir)
