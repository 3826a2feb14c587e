"""CLI command: bindsheet validate -- parse and lint a binding sheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bindsheet.config import BindsheetConfig
from bindsheet.errors import BindsheetError
from bindsheet.loader import load
from bindsheet.model.diagnostic import Severity
from bindsheet.validation import count_by_severity
from bindsheet.validation import validate as run_validate


@click.command()
@click.argument("sheetfile", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def validate(config: BindsheetConfig | None, sheetfile: str) -> None:
    """Parse and lint a binding sheet.

    Exits with code 1 when the sheet does not load or a check reports an
    error, 0 otherwise.
    """
    sheet_path = Path(sheetfile)

    try:
        sheet = load(sheet_path, config=config)
    except BindsheetError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(sheet)
    if not diagnostics:
        click.echo(f"OK: {sheet_path.name} is valid ({len(sheet)} rule(s), 0 diagnostics)")
        sys.exit(0)

    for diag in diagnostics:
        click.echo(str(diag))

    counts = count_by_severity(diagnostics)
    click.echo()
    click.echo(
        f"Summary: {counts[Severity.ERROR]} error(s), "
        f"{counts[Severity.WARNING]} warning(s), {counts[Severity.INFO]} info"
    )
    sys.exit(1 if counts[Severity.ERROR] else 0)
