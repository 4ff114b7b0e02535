"""cssel CLI entry point: Click group with subcommands."""

import logging

import click

from cssel import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssel")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """cssel - build, check and reformat CSS selectors."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from cssel.cli.check import check  # noqa: E402
from cssel.cli.format import format_  # noqa: E402
from cssel.cli.specificity import specificity  # noqa: E402

cli.add_command(check)
cli.add_command(format_)
cli.add_command(specificity)
