"""Command: strip markup down to plain text."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from bbmark.commands._base import BbCommand

if TYPE_CHECKING:
    from bbmark.commands._context import AppContext


@click.command(
    cls=BbCommand,
    examples="""\
  bbmark strip post.txt
  echo '[url=http://example.com]Example[/url]' | bbmark strip""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def strip(app: AppContext, source: TextIO) -> None:
    """Remove all markup from SOURCE (default: stdin), keeping the text."""
    app.emit(app.markup.strip(source.read()))
