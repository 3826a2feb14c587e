from bindsheet.errors import (
    MalformedRuleError,
    MalformedSettingError,
    MalformedSheetError,
    SheetSyntaxError,
)
from bindsheet.parser.literals import evaluate_list, evaluate_scalar
from bindsheet.parser.transformer import (
    KNOWN_SETTINGS,
    build_rule,
    parse_rule,
    parse_setting,
    parse_sheet,
)

__all__ = [
    "SheetSyntaxError",
    "MalformedSheetError",
    "MalformedRuleError",
    "MalformedSettingError",
    "evaluate_scalar",
    "evaluate_list",
    "parse_sheet",
    "parse_rule",
    "parse_setting",
    "build_rule",
    "KNOWN_SETTINGS",
]
