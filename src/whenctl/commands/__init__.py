"""Subcommand modules for whenctl.

Provides register_commands() which uses deferred imports to keep
``whenctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from whenctl.commands.format_cmd import format_cmd
    from whenctl.commands.resolve import resolve
    from whenctl.commands.weekday import weekday
    from whenctl.commands.words import words

    cli.add_command(resolve)
    cli.add_command(words)
    cli.add_command(weekday)
    cli.add_command(format_cmd)
