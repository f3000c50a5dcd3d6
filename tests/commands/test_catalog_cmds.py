"""Tests for the rules and tags CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from bbmark.cli import cli


@pytest.mark.usefixtures("workdir")
class TestRulesCommand:
    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["rules"])
        assert result.exit_code == 0
        assert "emailmore" in result.output
        assert "29 rules" in result.output

    def test_quiet_lists_ids_in_order(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "rules"])
        ids = result.output.split()
        assert ids[:7] == ["h1", "h2", "h3", "h4", "h5", "h6", "bold"]
        assert ids[-1] == "emailmore"

    def test_json_respects_config(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "bbmark.toml").write_text('[engine]\nenabled_rules = ["bold", "code"]\n')
        data = json.loads(cli_runner.invoke(cli, ["--json", "rules"]).output)
        assert [item["id"] for item in data["data"]["items"]] == ["bold", "code"]


@pytest.mark.usefixtures("workdir")
class TestTagsCommand:
    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tags"])
        assert result.exit_code == 0
        assert "Bold Text" in result.output
        assert "[b]Bold[/b]" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        data = json.loads(cli_runner.invoke(cli, ["--json", "tags"]).output)
        assert data["op"] == "list_tags"
        assert data["data"]["count"] == 13

    def test_check(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "tags", "--check"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "check_examples"
        assert data["warnings"] == []

    def test_localized_titles(self, cli_runner: CliRunner, workdir: Path) -> None:
        (workdir / "bbmark.toml").write_text('[catalog.messages]\n"BBCodeParser.BOLD" = "Fett"\n')
        result = cli_runner.invoke(cli, ["-q", "tags"])
        assert result.output.splitlines()[0] == "Fett"
