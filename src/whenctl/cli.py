"""Root CLI group for whenctl with global flags and command registration."""

from __future__ import annotations

from datetime import date

import click

from whenctl import __version__
from whenctl.commands import register_commands
from whenctl.commands._base import ISO_DATE, WhenGroup
from whenctl.commands._context import AppContext
from whenctl.config.settings import WhenSettings


@click.group(
    cls=WhenGroup,
    invoke_without_command=True,
    examples="""\
  whenctl resolve in 2 weeks
  whenctl --json resolve october 14th
  whenctl --today 2024-01-05 resolve friday
  whenctl words one hundred twenty three""",
)
@click.version_option(version=__version__, prog_name="whenctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the resulting value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--today",
    type=ISO_DATE,
    default=None,
    help="Reference date (YYYY-MM-DD) used instead of the system clock.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    today: date | None,
) -> None:
    """whenctl — resolve natural-language date expressions."""
    settings = WhenSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        today=today,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
