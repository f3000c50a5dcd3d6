"""Command: tag reference for help pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bbmark.commands._base import BbCommand

if TYPE_CHECKING:
    from bbmark.commands._context import AppContext


@click.command(
    cls=BbCommand,
    examples="""\
  bbmark tags
  bbmark tags --check
  bbmark --json tags""",
)
@click.option("--check", is_flag=True, help="Render each example and flag any left unchanged.")
@click.pass_obj
def tags(app: AppContext, check: bool) -> None:
    """List the supported tags with descriptions and examples."""
    if check:
        app.emit(app.catalog.check_examples())
    else:
        app.emit(app.catalog.list_tags())
