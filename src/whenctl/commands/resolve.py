"""Command: resolve a natural-language date expression."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from whenctl.commands._base import WhenCommand

if TYPE_CHECKING:
    from whenctl.commands._context import AppContext


@click.command(
    cls=WhenCommand,
    examples="""\
  whenctl resolve tomorrow
  whenctl resolve in 2 and a half weeks
  whenctl resolve "expires on October 14th 2019"
  whenctl --today 2024-01-01 resolve friday
  whenctl -q resolve ten days""",
)
@click.argument("text", nargs=-1, required=True)
@click.pass_obj
def resolve(app: AppContext, text: tuple[str, ...]) -> None:
    """Resolve TEXT such as "in 2 weeks" or "October 14th" to a calendar date."""
    app.emit(app.service.resolve(" ".join(text)))
