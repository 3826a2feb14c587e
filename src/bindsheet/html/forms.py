"""Radio/checkbox input groups inside an HTML form."""

from __future__ import annotations

from typing import Any

from bindsheet.errors import InputGroupError
from bindsheet.html.selector import compile_selector

__all__ = ["ButtonGroup", "InputItem"]

_GROUP_INPUTS = compile_selector("input[type=radio][name], input[type=checkbox][name]")


def _input_type(element: Any) -> str:
    return (element.get("type") or "").strip().lower()


class InputItem:
    """One radio button or checkbox belonging to a ButtonGroup."""

    def __init__(self, group: ButtonGroup, element: Any) -> None:
        if not isinstance(element.tag, str) or element.tag.lower() != "input":
            raise InputGroupError(f"Not an input element: <{element.tag}>")
        kind = _input_type(element)
        if kind not in ("radio", "checkbox"):
            raise InputGroupError(f"Input type {kind!r} is not radio or checkbox")
        if not element.get("name"):
            raise InputGroupError("Grouped inputs need a name attribute")
        self._group = group
        self._element = element
        self.radio = kind == "radio"

    @property
    def element(self) -> Any:
        return self._element

    @property
    def group(self) -> ButtonGroup:
        return self._group

    @property
    def form(self) -> Any:
        return self._group.form

    @property
    def value(self) -> str | None:
        return self._element.get("value")

    @value.setter
    def value(self, value: str) -> None:
        self._element.set("value", value)

    @property
    def selected(self) -> bool:
        return "checked" in self._element.attrib

    @selected.setter
    def selected(self, value: bool) -> None:
        if value:
            # Only one radio button per group may be checked.
            if self.radio:
                for item in self._group.items:
                    if item.radio and item is not self:
                        item.selected = False
            self._element.set("checked", "checked")
            return
        self._element.attrib.pop("checked", None)

    @property
    def text(self) -> str | None:
        """Text of the label attached to this input, if any."""
        label = self._group.find_label(self._element)
        if label is None:
            return None
        return label.text_content().strip()

    def __repr__(self) -> str:
        return f"InputItem(name={self._group.name!r}, value={self.value!r})"


class ButtonGroup:
    """Inputs sharing one ``name``: a radio group or a set of checkboxes."""

    def __init__(self, form: Any, name: str, elements: list[Any]) -> None:
        self._form = form
        self._name = name
        self._items = [InputItem(self, e) for e in elements]

    @classmethod
    def capture(cls, form: Any) -> list[ButtonGroup]:
        """Group the form's named radio/checkbox inputs by name, in document order."""
        grouped: dict[str, list[Any]] = {}
        for element in _GROUP_INPUTS.search(form):
            grouped.setdefault(element.get("name"), []).append(element)
        return [cls(form, name, elements) for name, elements in grouped.items()]

    @property
    def name(self) -> str:
        return self._name

    @property
    def form(self) -> Any:
        return self._form

    @property
    def items(self) -> list[InputItem]:
        return list(self._items)

    @property
    def allow_multiple_selections(self) -> bool:
        return any(not item.radio for item in self._items)

    @property
    def selected_values(self) -> list[str | None]:
        return [item.value for item in self._items if item.selected]

    def find_label(self, element: Any) -> Any | None:
        element_id = element.get("id")
        if element_id:
            for label in self._form.iter("label"):
                if label.get("for") == element_id:
                    return label
        for ancestor in element.iterancestors("label"):
            return ancestor
        return None

    def __repr__(self) -> str:
        return f"ButtonGroup(name={self._name!r}, items={len(self._items)})"
