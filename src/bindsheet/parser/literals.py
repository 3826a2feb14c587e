"""Literal evaluation for setting values.

Scalars:
    "text" | 'text'    -> str, backslash escapes removed
    [+-]digits         -> Int32, Int64, or Decimal when wider than 64 bits
    [+-]digits.digits  -> Decimal
    <null>             -> None
    anything else      -> the text itself

Lists:
    [ scalar (, scalar)* ] | []
"""

from __future__ import annotations

import re
from decimal import Decimal

from lark import Token, Transformer
from lark.exceptions import LarkError

from bindsheet.errors import UnsupportedSourceExpression
from bindsheet.model.values import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    Int32,
    Int64,
    Scalar,
)
from bindsheet.parser.grammar import get_parser

__all__ = ["evaluate_scalar", "evaluate_list", "unescape", "unquote"]

_QUOTED_RE = re.compile(r"""^(?:"((?:\\.|[^"\\])*)"|'((?:\\.|[^'\\])*)')$""", re.S)
_ESCAPE_RE = re.compile(r"\\(.)", re.S)
_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.\d*|\.\d+)$")
_SPECIAL_RE = re.compile(r"^<(\w+)>$")

# Known <name> tokens.
_SPECIAL_VALUES: dict[str, Scalar] = {
    "null": None,
}


def unescape(text: str) -> str:
    """Drop the backslash from every escaped character."""
    return _ESCAPE_RE.sub(r"\1", text)


def unquote(text: str) -> str | None:
    """Return the unescaped content of a quoted string, or None if unquoted."""
    match = _QUOTED_RE.match(text)
    if match is None:
        return None
    inner = match.group(1) if match.group(1) is not None else match.group(2)
    return unescape(inner)


def _integer(text: str) -> Scalar:
    value = int(text)
    if INT32_MIN <= value <= INT32_MAX:
        return Int32(value)
    if INT64_MIN <= value <= INT64_MAX:
        return Int64(value)
    return Decimal(text)


def evaluate_scalar(text: str) -> Scalar:
    """Evaluate a single literal into a typed scalar."""
    text = text.strip()

    quoted = unquote(text)
    if quoted is not None:
        return quoted

    if _INTEGER_RE.match(text):
        return _integer(text)

    if _DECIMAL_RE.match(text):
        return Decimal(text)

    special = _SPECIAL_RE.match(text)
    if special and special.group(1) in _SPECIAL_VALUES:
        return _SPECIAL_VALUES[special.group(1)]

    return text


class ListLiteralTransformer(Transformer):  # type: ignore[type-arg]
    """Turn a ``list_literal`` parse tree into a tuple of scalars."""

    def quoted_item(self, items: list[Token]) -> Scalar:
        return evaluate_scalar(str(items[0]))

    def bare_item(self, items: list[Token]) -> Scalar:
        return evaluate_scalar(str(items[0]))

    def list_literal(self, items: list[Scalar]) -> tuple[Scalar, ...]:
        return tuple(items)


def evaluate_list(text: str) -> tuple[Scalar, ...]:
    """Evaluate a list literal; raises UnsupportedSourceExpression otherwise."""
    try:
        tree = get_parser().parse(text.strip(), start="list_literal")
    except LarkError as exc:
        raise UnsupportedSourceExpression(text.strip()) from exc
    return ListLiteralTransformer().transform(tree)
