"""Sheet validator: runs every lint check over a loaded binding sheet."""

from __future__ import annotations

from collections import Counter
from typing import Callable

from bindsheet.errors import BindsheetError
from bindsheet.model.diagnostic import Diagnostic, Severity
from bindsheet.model.sheet import BindingSheet
from bindsheet.validation.rules import ALL_RULES

CheckFunc = Callable[[BindingSheet], list[Diagnostic]]


class ValidationError(BindsheetError):
    """Raised by validate_or_raise when a check reports an ERROR."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        errors = [str(d) for d in diagnostics if d.is_error]
        super().__init__(f"{len(errors)} binding sheet error(s): " + "; ".join(errors))


def validate(
    sheet: BindingSheet, extra_checks: list[CheckFunc] | None = None
) -> list[Diagnostic]:
    """Run the built-in checks, then *extra_checks*, in order."""
    checks = [*ALL_RULES, *(extra_checks or [])]
    return [diagnostic for check in checks for diagnostic in check(sheet)]


def validate_or_raise(
    sheet: BindingSheet, extra_checks: list[CheckFunc] | None = None
) -> list[Diagnostic]:
    """Like validate, but raises ValidationError on any ERROR diagnostic.

    Returns the warnings and info diagnostics otherwise.
    """
    diagnostics = validate(sheet, extra_checks=extra_checks)
    if any(d.is_error for d in diagnostics):
        raise ValidationError(diagnostics)
    return diagnostics


def count_by_severity(diagnostics: list[Diagnostic]) -> dict[Severity, int]:
    counts = Counter(d.severity for d in diagnostics)
    return {severity: counts.get(severity, 0) for severity in Severity}
