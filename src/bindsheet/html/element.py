"""Element adapter: writes bound values into lxml elements.

Binding paths:
    "" | text | innerText          -> element text content
    html | innerHTML               -> element inner HTML
    @name | attr.name | attributes.name -> attribute ``name``
    name                           -> attribute ``name`` (lowercased)
"""

from __future__ import annotations

from typing import Any

from lxml import html

from bindsheet.errors import InvalidBindingFormat, InvalidBindingPath
from bindsheet.model.values import NullBehavior, Scalar

__all__ = ["ElementAdapter", "format_value"]

_TEXT_PATHS = frozenset({"", "text", "innertext"})
_HTML_PATHS = frozenset({"html", "innerhtml"})
_ATTRIBUTE_PREFIXES = ("attr", "attributes")


def format_value(value: Scalar, format_string: str | None) -> str:
    """Render *value* as text.

    A format containing ``{`` is a ``str.format`` template; anything else is
    a format spec handed to ``format()``.
    """
    if format_string is None:
        return "" if value is None else str(value)
    try:
        if "{" in format_string:
            return format_string.format(value)
        return format(value, format_string)
    except (ValueError, KeyError, IndexError) as exc:
        raise InvalidBindingFormat(format_string, value) from exc


class ElementAdapter:
    """Binding operations on a single lxml element."""

    def __init__(self, element: Any) -> None:
        self.element = element

    # --- path resolution --------------------------------------------------------

    @staticmethod
    def resolve_path(path: str | None) -> tuple[str, str | None]:
        """Map a binding path to ("text" | "html" | "attribute", attribute name)."""
        path = (path or "").strip()
        lowered = path.lower()
        if lowered in _TEXT_PATHS:
            return ("text", None)
        if lowered in _HTML_PATHS:
            return ("html", None)
        if path.startswith("@") and len(path) > 1:
            return ("attribute", path[1:].lower())
        parts = path.split(".")
        if len(parts) == 2 and parts[0].lower() in _ATTRIBUTE_PREFIXES and parts[1]:
            return ("attribute", parts[1].lower())
        if len(parts) == 1:
            return ("attribute", lowered)
        raise InvalidBindingPath(path)

    # --- writes -----------------------------------------------------------------

    def bind(
        self,
        path: str | None,
        value: Scalar,
        format_string: str | None = None,
        null_behavior: NullBehavior = NullBehavior.IGNORE,
    ) -> None:
        """Write *value* into the location named by *path*."""
        kind, attribute = self.resolve_path(path)

        if value is None:
            if null_behavior is NullBehavior.IGNORE:
                return
            if null_behavior is NullBehavior.REMOVE:
                self._remove(kind, attribute)
                return
            text = ""
        else:
            text = format_value(value, format_string)

        if kind == "text":
            self.set_text(text)
        elif kind == "html":
            self.set_inner_html(text)
        else:
            self.element.set(attribute, text)

    def _remove(self, kind: str, attribute: str | None) -> None:
        if kind == "attribute":
            self.element.attrib.pop(attribute, None)
            return
        if self.element.getparent() is not None:
            self.element.drop_tree()

    def set_text(self, text: str) -> None:
        for child in list(self.element):
            self.element.remove(child)
        self.element.text = text

    def set_inner_html(self, markup: str) -> None:
        for child in list(self.element):
            self.element.remove(child)
        self.element.text = None
        if not markup:
            return
        fragments = html.fragments_fromstring(markup)
        if fragments and isinstance(fragments[0], str):
            self.element.text = fragments.pop(0)
        for fragment in fragments:
            self.element.append(fragment)
