"""Command: find the next occurrence of a weekday."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from whenctl.commands._base import ISO_DATE, WhenCommand

if TYPE_CHECKING:
    from whenctl.commands._context import AppContext


@click.command(
    cls=WhenCommand,
    examples="""\
  whenctl weekday friday
  whenctl weekday monday --from 2024-01-01
  whenctl weekday monday --from 2024-01-01 --include-start""",
)
@click.argument("name")
@click.option("--from", "start", type=ISO_DATE, default=None, help="Start date (YYYY-MM-DD).")
@click.option(
    "--include-start/--after-start",
    default=None,
    help="Return the start date itself when it already falls on NAME.",
)
@click.pass_obj
def weekday(
    app: AppContext,
    name: str,
    start: date | None,
    include_start: bool | None,
) -> None:
    """Find the next date falling on weekday NAME."""
    app.emit(app.service.next_weekday(name, start=start, include_start=include_start))
