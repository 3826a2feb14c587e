"""BindingSheet: an ordered, immutable collection of binding rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator

from bindsheet.model.rule import BindingRule

if TYPE_CHECKING:
    from bindsheet.config import BindsheetConfig


@dataclass(frozen=True)
class BindingSheet:
    """Rules parsed from a binding sheet, in source order.

    Order matters on apply: later rules may re-bind elements touched by
    earlier ones.
    """

    rules: tuple[BindingRule, ...] = ()

    def apply(self, scope: Any = None, config: BindsheetConfig | None = None) -> None:
        """Apply every rule to *scope*, or to the current binding context."""
        from bindsheet.binding.applier import apply_sheet

        apply_sheet(self, scope, config=config)

    def to_text(self) -> str:
        return "\n".join(rule.to_text() for rule in self.rules)

    def __iter__(self) -> Iterator[BindingRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __str__(self) -> str:
        return self.to_text()
