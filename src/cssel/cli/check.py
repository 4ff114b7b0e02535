"""CLI command: cssel check -- parse a selector and report problems."""

from __future__ import annotations

import sys

import click

from cssel.errors import DuplicateError, OrderError
from cssel.parser import ParseError, parse_selector


@click.command()
@click.argument("selector")
def check(selector: str) -> None:
    """Parse SELECTOR and verify its fragment order.

    Exits with code 0 and prints the rendered selector when it is valid,
    or code 1 with the error on stderr otherwise.
    """
    try:
        parsed = parse_selector(selector)
    except ParseError as exc:
        location = ""
        if exc.column is not None:
            location = f" (column {exc.column})"
        click.echo(f"Parse error{location}: {exc}", err=True)
        sys.exit(1)
    except OrderError as exc:
        click.echo(f"Order error: {exc}", err=True)
        sys.exit(1)
    except DuplicateError as exc:
        click.echo(f"Duplicate error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"OK: {parsed.render()}")
