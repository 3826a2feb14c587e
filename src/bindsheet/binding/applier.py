"""Binding applier: runs a rule's binding plan against matched elements."""

from __future__ import annotations

import logging
from itertools import chain, repeat
from typing import TYPE_CHECKING, Any, Callable, Iterable, TypeVar

from bindsheet.config import BindsheetConfig
from bindsheet.errors import BindingError, ObjectBindingNotImplemented
from bindsheet.html.context import BindingContext
from bindsheet.html.element import ElementAdapter
from bindsheet.model.rule import BindingRule
from bindsheet.model.values import Scalar, SourceType

if TYPE_CHECKING:
    from bindsheet.model.sheet import BindingSheet

__all__ = ["apply_rule", "apply_sheet", "bind_to"]

log = logging.getLogger("bindsheet")

T = TypeVar("T")
E = TypeVar("E")


def bind_to(
    items: Iterable[T],
    elements: Iterable[E],
    binder: Callable[[T, E], None],
    *,
    default: Any = None,
    has_default: bool = False,
) -> int:
    """Pair *items* with *elements* positionally and call *binder* per pair.

    Without a default, pairing stops at the shorter sequence. With one, the
    default is supplied to each element left over once *items* runs out.
    Returns the number of pairs bound.
    """
    if has_default:
        items = chain(items, repeat(default))
    count = 0
    for item, element in zip(items, elements):
        binder(item, element)
        count += 1
    return count


def _resolve_scope(scope: Any) -> Any:
    if scope is None:
        return BindingContext.current().scope
    return scope


def _bind_as_object(rule: BindingRule, elements: list[Any]) -> None:
    raise ObjectBindingNotImplemented(rule.selector.text)


def _bind_as_enumerable(rule: BindingRule, elements: list[Any]) -> None:
    items: tuple[Scalar, ...] = rule.data_source or ()

    def binder(item: Scalar, element: Any) -> None:
        ElementAdapter(element).bind(
            rule.target_path, item, rule.format_string, rule.null_behavior
        )

    default = rule.default.value if rule.default is not None else None
    bound = bind_to(items, elements, binder, default=default, has_default=rule.has_default)

    log.debug("Bound %d item(s) for %s", bound, rule.selector.text)
    if bound < len(elements):
        log.info(
            "%d element(s) matched by %s left unbound: data source exhausted",
            len(elements) - bound,
            rule.selector.text,
        )
    elif bound < len(items):
        log.debug(
            "%d item(s) for %s dropped: no more matching elements",
            len(items) - bound,
            rule.selector.text,
        )


_DISPATCH: dict[SourceType, Callable[[BindingRule, list[Any]], None]] = {
    SourceType.OBJECT: _bind_as_object,
    SourceType.ENUMERABLE: _bind_as_enumerable,
}


def apply_rule(
    rule: BindingRule, scope: Any = None, config: BindsheetConfig | None = None
) -> None:
    """Resolve the rule's selector in *scope* and bind its data source.

    When *scope* is None the current BindingContext supplies it.
    """
    config = config or BindsheetConfig()
    root = _resolve_scope(scope)
    elements = rule.selector.search(root, include_descendants=config.include_descendants)
    log.debug("Selector %s matched %d element(s)", rule.selector.text, len(elements))

    handler = _DISPATCH.get(rule.source_type)
    if handler is None:
        raise BindingError(f"Unknown source type: {rule.source_type!r}")
    handler(rule, elements)


def apply_sheet(
    sheet: BindingSheet, scope: Any = None, config: BindsheetConfig | None = None
) -> None:
    """Apply every rule of *sheet* in source order."""
    root = _resolve_scope(scope)
    for rule in sheet.rules:
        apply_rule(rule, root, config=config)
