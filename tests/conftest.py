"""Shared pytest fixtures for bbmark tests."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from bbmark.config.settings import BbSettings
from bbmark.domain.engine import MarkupEngine
from bbmark.domain.rules import default_registry
from bbmark.services.telemetry import disable_telemetry


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` invocations enable telemetry on the test thread; switch it back off."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def engine() -> MarkupEngine:
    """Engine over the default rule table."""
    return MarkupEngine(default_registry())


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory with no config discoverable from it."""
    monkeypatch.delenv("BBMARK_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(workdir: Path) -> BbSettings:
    """Settings built from code defaults only."""
    return BbSettings.from_cli(start=workdir)


@pytest.fixture
def settings_from_toml(workdir: Path) -> Callable[[str], BbSettings]:
    """Factory: write ``bbmark.toml`` into the working directory and load settings."""

    def _load(toml: str) -> BbSettings:
        (workdir / "bbmark.toml").write_text(toml, encoding="utf-8")
        return BbSettings.from_cli(start=workdir)

    return _load
