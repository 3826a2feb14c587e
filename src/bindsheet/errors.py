"""Error hierarchy for binding sheets."""

from __future__ import annotations


class BindsheetError(Exception):
    """Base error for all bindsheet errors."""


# ---------------------------------------------------------------------------
# Grammar errors
# ---------------------------------------------------------------------------


class SheetSyntaxError(BindsheetError):
    """Raised when binding sheet source does not match the grammar."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class MalformedSheetError(SheetSyntaxError):
    """The document is not a sequence of rule blocks."""


class MalformedRuleError(SheetSyntaxError):
    """A rule block does not match ``<selector> { settings }``."""


class MalformedSettingError(MalformedRuleError):
    """A setting does not match ``name: value;``."""


# ---------------------------------------------------------------------------
# Analysis errors
# ---------------------------------------------------------------------------


class DuplicateSettingError(BindsheetError):
    """The same setting name appears twice in one rule."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate setting: {name!r}")


class UnsupportedSourceExpression(BindsheetError):
    """A ``binding-source`` value is not a list literal."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(f"Unsupported binding source expression: {expression!r}")


class InvalidEnumValue(BindsheetError):
    """An enum-valued setting has an unrecognized value."""

    def __init__(self, setting: str, value: str, allowed: list[str]) -> None:
        self.setting = setting
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid value {value!r} for {setting}; expected one of: "
            + ", ".join(allowed)
        )


# ---------------------------------------------------------------------------
# Binding errors
# ---------------------------------------------------------------------------


class BindingError(BindsheetError):
    """Raised when a rule cannot be applied to a document."""


class ObjectBindingNotImplemented(BindingError, NotImplementedError):
    """Object-mode binding is not supported."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(
            f"Object binding is not implemented (rule {selector!r}); "
            "use a list binding-source"
        )


class InvalidBindingPath(BindingError):
    """A ``binding-path`` does not name a writable element location."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Invalid binding path: {path!r}")


class InvalidBindingFormat(BindingError):
    """A ``binding-format`` cannot render the bound value."""

    def __init__(self, format_string: str, value: object) -> None:
        self.format_string = format_string
        self.value = value
        super().__init__(f"Cannot format {value!r} with {format_string!r}")


class NoBindingContextError(BindingError):
    """No scope was given and no binding context is active."""


class InputGroupError(BindsheetError):
    """An element cannot take part in a radio/checkbox input group."""
