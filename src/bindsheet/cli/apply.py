"""CLI command: bindsheet apply -- bind a sheet into an HTML document."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from lxml import html

from bindsheet.config import BindsheetConfig
from bindsheet.errors import BindsheetError
from bindsheet.html.context import BindingContext
from bindsheet.loader import load


@click.command()
@click.argument("sheetfile", type=click.Path(exists=True, dir_okay=False))
@click.argument("htmlfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None, help="Write the result here instead of stdout")
@click.pass_obj
def apply(
    config: BindsheetConfig | None,
    sheetfile: str,
    htmlfile: str,
    output: str | None,
) -> None:
    """Apply SHEETFILE to HTMLFILE and print the bound document."""
    config = config or BindsheetConfig()

    try:
        sheet = load(Path(sheetfile), config=config)
    except BindsheetError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    document = html.document_fromstring(Path(htmlfile).read_text(encoding=config.encoding))

    try:
        with BindingContext(document):
            sheet.apply(config=config)
    except BindsheetError as exc:
        click.echo(f"Binding failed: {exc}", err=True)
        sys.exit(1)

    result = html.tostring(
        document, pretty_print=config.pretty_print, encoding="unicode", doctype="<!DOCTYPE html>"
    )
    if output:
        Path(output).write_text(result, encoding=config.encoding)
        click.echo(f"Wrote {output}")
    else:
        click.echo(result, nl=False)
