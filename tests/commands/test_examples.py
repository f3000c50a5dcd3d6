"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from bbmark.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--examples"], ["bbmark render post.txt", "bbmark tags"]),
    (["render", "--examples"], ["--case-insensitive"]),
    (["strip", "--examples"], ["bbmark strip"]),
    (["excerpt", "--examples"], ["--length 80"]),
    (["rules", "--examples"], ["bbmark rules"]),
    (["tags", "--examples"], ["--check"]),
]


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output
