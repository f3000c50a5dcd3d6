"""Command: plain-text preview of a post."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from bbmark.commands._base import BbCommand

if TYPE_CHECKING:
    from bbmark.commands._context import AppContext


@click.command(
    cls=BbCommand,
    examples="""\
  bbmark excerpt post.txt
  bbmark excerpt --length 80 post.txt
  bbmark excerpt --length 80 --suffix ' [more]' post.txt""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--length", type=int, default=None, help="Maximum characters before the suffix.")
@click.option("--suffix", default=None, help="Appended when the text was cut.")
@click.pass_obj
def excerpt(app: AppContext, source: TextIO, length: int | None, suffix: str | None) -> None:
    """Strip SOURCE (default: stdin) and cut it to a short single-line preview."""
    app.emit(app.markup.excerpt(source.read(), length=length, suffix=suffix))
