"""flowstyle CLI entry point: Click group with subcommands."""

import logging

import click

from flowstyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="flowstyle")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """flowstyle - composable CSS classes from typed style declarations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from flowstyle.cli.check import check  # noqa: E402
from flowstyle.cli.css import css  # noqa: E402
from flowstyle.cli.inspect import inspect  # noqa: E402

cli.add_command(css)
cli.add_command(inspect)
cli.add_command(check)
