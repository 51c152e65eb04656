"""selector-usage CLI entry point: Click group with subcommands."""

import click

from selector_usage import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selector-usage")
def cli() -> None:
    """selector-usage - find which stylesheet selectors a site really uses."""


# Import and register subcommands
from selector_usage.cli.inspect import inspect  # noqa: E402
from selector_usage.cli.run import run  # noqa: E402

cli.add_command(run)
cli.add_command(inspect)
