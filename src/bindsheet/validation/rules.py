"""Lint checks for binding sheets.

Each check takes a BindingSheet and returns a list of Diagnostic objects
describing any issues found. Checks never raise; a sheet that loaded
cleanly can still bind in ways that are likely mistakes.
"""

from __future__ import annotations

from bindsheet.model.diagnostic import Diagnostic, Severity
from bindsheet.model.sheet import BindingSheet
from bindsheet.model.values import SourceType
from bindsheet.parser.transformer import (
    FORMAT,
    KNOWN_SETTINGS,
    PATH,
    SOURCE,
    SOURCE_DEFAULT,
)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def check_object_mode(sheet: BindingSheet) -> list[Diagnostic]:
    """Object-mode rules fail on apply."""
    diagnostics: list[Diagnostic] = []
    for rule in sheet.rules:
        if rule.source_type is SourceType.OBJECT:
            diagnostics.append(
                Diagnostic(
                    rule="check_object_mode",
                    severity=Severity.ERROR,
                    message="Rule binds in object mode, which is not supported.",
                    selector=rule.selector.text,
                    fix="Give the rule a list binding-source or set binding-source-type: enumerable.",
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------


def check_unknown_settings(sheet: BindingSheet) -> list[Diagnostic]:
    """Setting names outside the binding-* set are ignored on apply."""
    diagnostics: list[Diagnostic] = []
    for rule in sheet.rules:
        for name in rule.settings.names():
            if name.lower() not in KNOWN_SETTINGS:
                diagnostics.append(
                    Diagnostic(
                        rule="check_unknown_settings",
                        severity=Severity.WARNING,
                        message=f"Unknown setting '{name}' is ignored.",
                        selector=rule.selector.text,
                        setting=name,
                        fix="Known settings: " + ", ".join(sorted(KNOWN_SETTINGS)),
                    )
                )
    return diagnostics


def check_default_without_source(sheet: BindingSheet) -> list[Diagnostic]:
    """A default only matters once a data source is exhausted."""
    diagnostics: list[Diagnostic] = []
    for rule in sheet.rules:
        if SOURCE_DEFAULT in rule.settings and SOURCE not in rule.settings:
            diagnostics.append(
                Diagnostic(
                    rule="check_default_without_source",
                    severity=Severity.WARNING,
                    message="binding-source-default is set but binding-source is not.",
                    selector=rule.selector.text,
                    setting=SOURCE_DEFAULT,
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Info
# ---------------------------------------------------------------------------


def check_format_without_path(sheet: BindingSheet) -> list[Diagnostic]:
    """Formatted values without a path are written as element text."""
    diagnostics: list[Diagnostic] = []
    for rule in sheet.rules:
        if FORMAT in rule.settings and PATH not in rule.settings:
            diagnostics.append(
                Diagnostic(
                    rule="check_format_without_path",
                    severity=Severity.INFO,
                    message="binding-format without binding-path binds to element text.",
                    selector=rule.selector.text,
                    setting=FORMAT,
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_object_mode,
    check_unknown_settings,
    check_default_without_source,
    check_format_without_path,
]
