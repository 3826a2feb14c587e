"""Bindsheet CLI entry point: Click group with subcommands."""

import logging

import click

from bindsheet import __version__

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(version=__version__, prog_name="bindsheet")
@click.option("--verbose", "-v", is_flag=True, help="Log binding details to stderr (same as --log-level DEBUG)")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Threshold for bindsheet log messages",
)
@click.option("--encoding", default="utf-8", show_default=True, help="Sheet and HTML file encoding")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_level: str, encoding: str) -> None:
    """Bindsheet - bind data into HTML with CSS-like binding sheets."""
    from bindsheet.config import BindsheetConfig

    level = "DEBUG" if verbose else log_level.upper()
    config = BindsheetConfig(encoding=encoding, log_level=level)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("bindsheet").setLevel(config.log_level)
    ctx.obj = config


# Import and register subcommands
from bindsheet.cli.apply import apply  # noqa: E402
from bindsheet.cli.inspect import inspect  # noqa: E402
from bindsheet.cli.validate import validate  # noqa: E402

cli.add_command(apply)
cli.add_command(validate)
cli.add_command(inspect)
