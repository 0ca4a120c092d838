"""Command: format a date for display."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from whenctl.commands._base import ISO_DATE, WhenCommand
from whenctl.domain.formatting import components_from_choices

if TYPE_CHECKING:
    from whenctl.commands._context import AppContext

_WIDTHS = click.Choice(["short", "full", "none"])


@click.command(
    "format",
    cls=WhenCommand,
    examples="""\
  whenctl format 2019-10-14
  whenctl format 2019-10-14 --dow full --month full --year full
  whenctl format 2019-10-14 --month short --ordinal
  whenctl format 2019-10-14 --plain""",
)
@click.argument("value", type=ISO_DATE)
@click.option("--dow", type=_WIDTHS, default=None, help="Include the day of week.")
@click.option("--month", type=_WIDTHS, default=None, help="Include the month name.")
@click.option("--year", type=_WIDTHS, default=None, help="Include the year.")
@click.option("--ordinal/--no-ordinal", default=None, help="Render the day as 1st, 2nd, ...")
@click.option("--plain", is_flag=True, help="Render only the day of the month.")
@click.pass_obj
def format_cmd(
    app: AppContext,
    value: date,
    dow: str | None,
    month: str | None,
    year: str | None,
    ordinal: bool | None,
    plain: bool,
) -> None:
    """Format VALUE (YYYY-MM-DD) as text.

    Without --dow/--month/--year the [format] config defaults apply;
    --plain drops every optional part.
    """
    components = None
    if plain:
        components = set()
    elif dow or month or year:
        components = components_from_choices(dow=dow, month=month, year=year)
    app.emit(app.service.format(value, components, ordinal=ordinal))
