"""Binding rule model: Settings and BindingRule."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterable, Iterator

from bindsheet.errors import DuplicateSettingError
from bindsheet.model.values import DefaultValue, NullBehavior, Scalar, SourceType

if TYPE_CHECKING:
    from bindsheet.config import BindsheetConfig
    from bindsheet.html.selector import Selector


class Settings:
    """Ordered, case-insensitive mapping of setting name to raw value text.

    Names keep the spelling they were written with; lookups ignore case.
    Read-only once built. A repeated name raises DuplicateSettingError.
    """

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        entries: dict[str, tuple[str, str]] = {}
        for name, value in pairs:
            key = name.lower()
            if key in entries:
                raise DuplicateSettingError(name)
            entries[key] = (name, value)
        self._entries = MappingProxyType(entries)

    def get(self, name: str, default: str | None = None) -> str | None:
        entry = self._entries.get(name.lower())
        if entry is None:
            return default
        return entry[1]

    def names(self) -> list[str]:
        return [name for name, _ in self._entries.values()]

    def items(self) -> list[tuple[str, str]]:
        return list(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._entries

    def __getitem__(self, name: str) -> str:
        return self._entries[name.lower()][1]

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._entries)

    def _values(self) -> dict[str, str]:
        return {key: value for key, (_, value) in self._entries.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Settings):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash(frozenset(self._values().items()))

    def __repr__(self) -> str:
        return f"Settings({self.items()!r})"


@dataclass(frozen=True)
class BindingRule:
    """A selector plus the binding plan derived from its settings."""

    selector: Selector
    settings: Settings = field(default_factory=Settings)
    data_source: tuple[Scalar, ...] | None = None
    source_type: SourceType = SourceType.OBJECT
    default: DefaultValue | None = None
    target_path: str | None = None
    format_string: str | None = None
    null_behavior: NullBehavior = NullBehavior.IGNORE

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def apply(self, scope: Any = None, config: BindsheetConfig | None = None) -> None:
        """Bind this rule's data into *scope* (or the current binding context)."""
        from bindsheet.binding.applier import apply_rule

        apply_rule(self, scope, config=config)

    def to_text(self) -> str:
        lines = [self.selector.text, "{"]
        for name, value in self.settings.items():
            lines.append(f"  {name}: {value};")
        lines.append("}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_text()
