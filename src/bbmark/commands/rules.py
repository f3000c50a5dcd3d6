"""Command: show the active rule table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bbmark.commands._base import BbCommand

if TYPE_CHECKING:
    from bbmark.commands._context import AppContext


@click.command(
    cls=BbCommand,
    examples="""\
  bbmark rules
  bbmark -v rules
  bbmark --json rules""",
)
@click.pass_obj
def rules(app: AppContext) -> None:
    """List transformation rules in the order they are applied."""
    app.emit(app.markup.list_rules())
