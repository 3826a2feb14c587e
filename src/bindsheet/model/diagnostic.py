"""Diagnostic model: structured lint messages for binding sheets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single lint finding about a binding sheet.

    Attributes:
        rule: Identifier for the lint check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        selector: Selector text of the binding rule involved, if applicable.
        setting: The setting name involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    selector: str | None = None
    setting: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.selector and self.setting:
            location = f" [{self.selector} / {self.setting}]"
        elif self.selector:
            location = f" [{self.selector}]"
        return f"{self.severity.value}{location}: {self.message}"
