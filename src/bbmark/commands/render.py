"""Command: render markup to hypertext."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from bbmark.commands._base import BbCommand

if TYPE_CHECKING:
    from bbmark.commands._context import AppContext


@click.command(
    cls=BbCommand,
    examples="""\
  bbmark render post.txt
  echo '[b]Hello[/b]' | bbmark render
  bbmark render --case-insensitive post.txt
  bbmark --json render post.txt""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--case-insensitive/--case-sensitive",
    "case_insensitive",
    default=None,
    help="Match tag keywords regardless of case (default from [engine] config).",
)
@click.pass_obj
def render(app: AppContext, source: TextIO, case_insensitive: bool | None) -> None:
    """Render bracket-tag markup from SOURCE (default: stdin) to HTML."""
    app.emit(app.markup.render(source.read(), case_insensitive=case_insensitive))
