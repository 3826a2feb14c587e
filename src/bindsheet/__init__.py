"""Bindsheet: CSS-like binding sheets that bind data into HTML documents."""

from bindsheet.config import BindsheetConfig
from bindsheet.errors import (
    BindingError,
    BindsheetError,
    DuplicateSettingError,
    InvalidBindingFormat,
    InvalidBindingPath,
    InvalidEnumValue,
    MalformedRuleError,
    MalformedSettingError,
    MalformedSheetError,
    NoBindingContextError,
    ObjectBindingNotImplemented,
    SheetSyntaxError,
    UnsupportedSourceExpression,
)
from bindsheet.html.context import BindingContext
from bindsheet.loader import load, loads
from bindsheet.model import (
    BindingRule,
    BindingSheet,
    DefaultValue,
    Int32,
    Int64,
    NullBehavior,
    SourceType,
)
from bindsheet.parser import evaluate_list, evaluate_scalar, parse_rule, parse_sheet

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "loads",
    "parse_sheet",
    "parse_rule",
    "evaluate_scalar",
    "evaluate_list",
    "BindingSheet",
    "BindingRule",
    "BindingContext",
    "BindsheetConfig",
    "DefaultValue",
    "Int32",
    "Int64",
    "NullBehavior",
    "SourceType",
    # errors
    "BindsheetError",
    "SheetSyntaxError",
    "MalformedSheetError",
    "MalformedRuleError",
    "MalformedSettingError",
    "DuplicateSettingError",
    "UnsupportedSourceExpression",
    "InvalidEnumValue",
    "BindingError",
    "ObjectBindingNotImplemented",
    "InvalidBindingFormat",
    "InvalidBindingPath",
    "NoBindingContextError",
]
