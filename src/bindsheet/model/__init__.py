"""Bindsheet model layer -- public type re-exports."""

from bindsheet.model.diagnostic import Diagnostic, Severity
from bindsheet.model.rule import BindingRule, Settings
from bindsheet.model.sheet import BindingSheet
from bindsheet.model.values import (
    DefaultValue,
    Int32,
    Int64,
    NullBehavior,
    Scalar,
    SourceType,
)

__all__ = [
    # rules
    "BindingRule",
    "Settings",
    "BindingSheet",
    # values
    "Scalar",
    "Int32",
    "Int64",
    "DefaultValue",
    "SourceType",
    "NullBehavior",
    # diagnostic
    "Severity",
    "Diagnostic",
]
