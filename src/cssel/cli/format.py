"""CLI command: cssel format -- re-render a selector in canonical form."""

from __future__ import annotations

import sys

import click

from cssel.errors import SelectorError
from cssel.model.config import RenderOptions
from cssel.parser import parse_selector


@click.command(name="format")
@click.argument("selector")
@click.option(
    "--normalize-descendant",
    is_flag=True,
    default=False,
    help="Render the descendant combinator as a single space.",
)
def format_(selector: str, normalize_descendant: bool) -> None:
    """Parse SELECTOR and print it back with canonical combinator spacing."""
    try:
        parsed = parse_selector(selector)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    options = RenderOptions(normalize_descendant=normalize_descendant)
    click.echo(parsed.render(options))
