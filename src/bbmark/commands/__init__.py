"""Subcommand modules for bbmark.

Provides register_commands() which uses deferred imports to keep
``bbmark --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from bbmark.commands.excerpt import excerpt
    from bbmark.commands.render import render
    from bbmark.commands.rules import rules
    from bbmark.commands.strip import strip
    from bbmark.commands.tags import tags

    cli.add_command(render)
    cli.add_command(strip)
    cli.add_command(excerpt)
    cli.add_command(rules)
    cli.add_command(tags)
