"""Tests for the strip and excerpt CLI commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from bbmark.cli import cli


@pytest.mark.usefixtures("workdir")
class TestStripCommand:
    def test_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["strip"], input="[url=http://example.com]Example[/url]")
        assert result.exit_code == 0
        assert result.output == "Example\n"

    def test_always_case_insensitive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["strip"], input="[B]x[/B]")
        assert result.output == "x\n"

    def test_unterminated(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["strip"], input="[b]orphan")
        assert result.output == "[b]orphan\n"

    def test_verbose_keeps_stdout_clean(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "strip"], input="[i]plain[/i]")
        assert result.stdout == "plain\n"
        assert "MarkupService.strip" in result.stderr


@pytest.mark.usefixtures("workdir")
class TestExcerptCommand:
    def test_default(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["excerpt"], input="[quote]Hi\nthere[/quote]")
        assert result.exit_code == 0
        assert result.output == "Hi there\n"

    def test_length_and_suffix(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["excerpt", "--length", "9", "--suffix", "~"],
            input="[b]The quick brown fox[/b]",
        )
        assert result.output == "The quick~\n"

    def test_json_reports_truncation(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "excerpt", "--length", "3"], input="one two"
        )
        data = json.loads(result.output)
        assert data["data"]["truncated"] is True
        assert data["data"]["output"] == "one..."

    def test_invalid_length(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["excerpt", "--length", "0"], input="x")
        assert result.exit_code == 1
        assert "ERROR" in result.output
