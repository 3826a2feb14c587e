"""Lark Transformer and analysis that turn binding sheet source into rules."""

from __future__ import annotations

from lark import Token, Transformer
from lark.exceptions import LarkError, UnexpectedInput

from bindsheet.errors import (
    InvalidEnumValue,
    MalformedRuleError,
    MalformedSettingError,
    MalformedSheetError,
    SheetSyntaxError,
)
from bindsheet.html.selector import compile_selector
from bindsheet.model.rule import BindingRule, Settings
from bindsheet.model.values import DefaultValue, NullBehavior, SourceType
from bindsheet.parser.grammar import SETTING_TERMINALS, get_parser
from bindsheet.parser.literals import evaluate_list, evaluate_scalar, unquote

__all__ = ["parse_sheet", "parse_rule", "parse_setting", "build_rule"]

# Setting names understood by the analyzer. Others stay in the raw settings.
SOURCE = "binding-source"
SOURCE_TYPE = "binding-source-type"
SOURCE_DEFAULT = "binding-source-default"
PATH = "binding-path"
FORMAT = "binding-format"
NULL_BEHAVIOR = "binding-null-behavior"

KNOWN_SETTINGS = frozenset(
    {SOURCE, SOURCE_TYPE, SOURCE_DEFAULT, PATH, FORMAT, NULL_BEHAVIOR}
)

_SOURCE_TYPES: dict[str, SourceType] = {
    "object": SourceType.OBJECT,
    "enumerable": SourceType.ENUMERABLE,
}

_NULL_BEHAVIORS: dict[str, NullBehavior] = {
    "ignore": NullBehavior.IGNORE,
    "empty": NullBehavior.EMPTY,
    "remove": NullBehavior.REMOVE,
}


class SheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a parse tree into (selector text, settings) pairs."""

    def setting(self, items: list[Token]) -> tuple[str, str]:
        return (str(items[0]), str(items[1]).strip())

    def rule(self, items: list[object]) -> tuple[str, list[tuple[str, str]]]:
        selector = str(items[0]).strip()
        settings = [item for item in items[1:] if isinstance(item, tuple)]
        return (selector, settings)

    def sheet(self, items: list[object]) -> list[tuple[str, list[tuple[str, str]]]]:
        return list(items)  # type: ignore[arg-type]


def _expected(exc: UnexpectedInput) -> set[str]:
    expected = getattr(exc, "expected", None) or getattr(exc, "allowed", None)
    return set(expected or ())


def _parse(text: str, start: str, error: type[SheetSyntaxError]) -> object:
    try:
        tree = get_parser().parse(text, start=start)
    except UnexpectedInput as exc:
        expected = _expected(exc)
        # Expecting "}" means the last setting was complete.
        if (
            error is MalformedRuleError
            and expected & SETTING_TERMINALS
            and "RBRACE" not in expected
        ):
            error = MalformedSettingError
        line = getattr(exc, "line", None)
        column = getattr(exc, "column", None)
        raise error(str(exc), line=line, column=column) from exc
    except LarkError as exc:
        raise error(str(exc)) from exc
    return SheetTransformer().transform(tree)


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


def _lookup(table: dict[str, object], setting: str, value: str) -> object:
    key = value.strip().lower()
    if key not in table:
        raise InvalidEnumValue(setting, value.strip(), sorted(table))
    return table[key]


def build_rule(selector_text: str, pairs: list[tuple[str, str]]) -> BindingRule:
    """Compile the selector, collect settings and derive the binding plan."""
    selector = compile_selector(selector_text)

    settings = Settings(pairs)

    data_source = None
    source = settings.get(SOURCE)
    if source is not None:
        data_source = evaluate_list(source)

    source_type_text = settings.get(SOURCE_TYPE)
    if source_type_text is None:
        source_type = (
            SourceType.ENUMERABLE if data_source is not None else SourceType.OBJECT
        )
    else:
        source_type = _lookup(_SOURCE_TYPES, SOURCE_TYPE, source_type_text)  # type: ignore[assignment]

    default = None
    default_text = settings.get(SOURCE_DEFAULT)
    if default_text is not None:
        default = DefaultValue(evaluate_scalar(default_text))

    target_path = None
    path = settings.get(PATH)
    if path is not None:
        target_path = path.strip()

    format_string = None
    fmt = settings.get(FORMAT)
    if fmt is not None:
        fmt = fmt.strip()
        quoted = unquote(fmt)
        format_string = quoted if quoted is not None else fmt

    null_behavior = NullBehavior.IGNORE
    null_text = settings.get(NULL_BEHAVIOR)
    if null_text is not None:
        null_behavior = _lookup(_NULL_BEHAVIORS, NULL_BEHAVIOR, null_text)  # type: ignore[assignment]

    return BindingRule(
        selector=selector,
        settings=settings,
        data_source=data_source,
        source_type=source_type,  # type: ignore[arg-type]
        default=default,
        target_path=target_path,
        format_string=format_string,
        null_behavior=null_behavior,  # type: ignore[arg-type]
    )


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def parse_setting(source: str) -> tuple[str, str]:
    """Parse one ``name: value;`` line into a (name, value) pair."""
    return _parse(source.strip(), "setting", MalformedSettingError)  # type: ignore[return-value]


def parse_rule(source: str) -> BindingRule:
    """Parse one ``<selector> { settings }`` block into a BindingRule."""
    selector, pairs = _parse(source.strip(), "rule", MalformedRuleError)  # type: ignore[misc]
    return build_rule(selector, pairs)


def parse_sheet(source: str) -> tuple[BindingRule, ...]:
    """Parse a whole binding sheet into its rules, in source order."""
    blocks = _parse(source.strip(), "sheet", MalformedSheetError)
    return tuple(build_rule(selector, pairs) for selector, pairs in blocks)  # type: ignore[attr-defined]
