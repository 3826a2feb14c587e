"""CSS selector compilation over lxml trees."""

from __future__ import annotations

from typing import Any

from cssselect import HTMLTranslator, SelectorError
from lxml import etree

from bindsheet.errors import MalformedRuleError

__all__ = ["Selector", "compile_selector"]

_translator = HTMLTranslator()


def _root(scope: Any) -> Any:
    """Accept an element or a whole ElementTree as the search scope."""
    getroot = getattr(scope, "getroot", None)
    if callable(getroot):
        return getroot()
    return scope


class Selector:
    """A compiled CSS selector.

    ``search`` matches the scope element itself and its descendants, or only
    its direct children when ``include_descendants`` is false. Results are in
    document order.
    """

    def __init__(self, text: str) -> None:
        self.text = text.strip()
        self._descendants = etree.XPath(
            _translator.css_to_xpath(self.text, prefix="descendant-or-self::")
        )
        self._children = etree.XPath(
            _translator.css_to_xpath(self.text, prefix="child::")
        )

    def search(self, scope: Any, include_descendants: bool = True) -> list[Any]:
        xpath = self._descendants if include_descendants else self._children
        return list(xpath(_root(scope)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Selector):
            return NotImplemented
        return self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self) -> str:
        return f"Selector({self.text!r})"

    def __str__(self) -> str:
        return self.text


def compile_selector(text: str) -> Selector:
    """Compile selector text; raises MalformedRuleError if cssselect rejects it."""
    try:
        return Selector(text)
    except (SelectorError, etree.XPathError) as exc:
        raise MalformedRuleError(f"Invalid selector {text.strip()!r}: {exc}") from exc
