"""Binding context: the document scope rules bind into by default."""

from __future__ import annotations

from contextvars import ContextVar, Token
from typing import Any

from bindsheet.errors import NoBindingContextError

_current: ContextVar[BindingContext | None] = ContextVar("bindsheet_context", default=None)


class BindingContext:
    """Makes *scope* the active binding scope inside a ``with`` block.

    Contexts nest; leaving a block restores the previous one. The active
    context is tracked per thread and per asyncio task.
    """

    def __init__(self, scope: Any) -> None:
        self.scope = scope
        self._tokens: list[Token[BindingContext | None]] = []

    @staticmethod
    def current() -> BindingContext:
        context = _current.get()
        if context is None:
            raise NoBindingContextError("No binding context is active and no scope was given")
        return context

    def __enter__(self) -> BindingContext:
        self._tokens.append(_current.set(self))
        return self

    def __exit__(self, *exc_info: object) -> None:
        _current.reset(self._tokens.pop())

    def __repr__(self) -> str:
        return f"BindingContext(scope={self.scope!r})"
