from whenctl.cli import cli

cli()
