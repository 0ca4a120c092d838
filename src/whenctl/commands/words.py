"""Command: convert English number words to digits."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from whenctl.commands._base import WhenCommand

if TYPE_CHECKING:
    from whenctl.commands._context import AppContext


@click.command(
    cls=WhenCommand,
    examples="""\
  whenctl words twenty three
  whenctl words one hundred and five
  whenctl words one point five
  whenctl -q words two million three thousand""",
)
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def words(app: AppContext, text: tuple[str, ...]) -> None:
    """Convert worded number TEXT into a digit string."""
    app.emit(app.service.convert_words(" ".join(text)))
