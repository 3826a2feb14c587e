"""CLI command: bindsheet inspect -- show each rule's binding plan."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bindsheet.config import BindsheetConfig
from bindsheet.errors import BindsheetError
from bindsheet.loader import load
from bindsheet.model.rule import BindingRule
from bindsheet.parser.transformer import KNOWN_SETTINGS


def _describe(rule: BindingRule) -> list[str]:
    lines = [f"  source-type: {rule.source_type.value}"]
    if rule.data_source is not None:
        lines.append(f"  source:      {list(rule.data_source)!r}")
    if rule.default is not None:
        lines.append(f"  default:     {rule.default.value!r}")
    lines.append(f"  path:        {rule.target_path or '(text)'}")
    if rule.format_string is not None:
        lines.append(f"  format:      {rule.format_string!r}")
    lines.append(f"  null:        {rule.null_behavior.value}")
    extra = [n for n in rule.settings.names() if n.lower() not in KNOWN_SETTINGS]
    if extra:
        lines.append(f"  ignored:     {', '.join(extra)}")
    return lines


@click.command()
@click.argument("sheetfile", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def inspect(config: BindsheetConfig | None, sheetfile: str) -> None:
    """Load a binding sheet and print the binding plan of every rule."""
    try:
        sheet = load(Path(sheetfile), config=config)
    except BindsheetError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Rules: {len(sheet)}")
    for index, rule in enumerate(sheet.rules, start=1):
        click.echo()
        click.echo(f"[{index}] {rule.selector.text}")
        for line in _describe(rule):
            click.echo(line)
