"""CLI command: cssel specificity -- print the specificity of a selector."""

from __future__ import annotations

import sys

import click

from cssel.errors import SelectorError
from cssel.parser import parse_selector


@click.command()
@click.argument("selector")
def specificity(selector: str) -> None:
    """Print the (ids, classes, elements) specificity of SELECTOR as a,b,c."""
    try:
        parsed = parse_selector(selector)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    a, b, c = parsed.specificity()
    click.echo(f"{a},{b},{c}")
