"""lxml-backed document collaborators: selectors, element writes, context, forms."""

from bindsheet.html.context import BindingContext
from bindsheet.html.element import ElementAdapter, format_value
from bindsheet.html.forms import ButtonGroup, InputItem
from bindsheet.html.selector import Selector, compile_selector

__all__ = [
    "BindingContext",
    "ElementAdapter",
    "format_value",
    "ButtonGroup",
    "InputItem",
    "Selector",
    "compile_selector",
]
