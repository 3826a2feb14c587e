"""Scalar values, enums and the default-value wrapper used by binding rules."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Int32(int):
    """An integer literal that fits in 32 bits."""

    def __repr__(self) -> str:
        return f"Int32({int(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)


class Int64(int):
    """An integer literal that needs 64 bits."""

    def __repr__(self) -> str:
        return f"Int64({int(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)


Scalar = Union[str, Int32, Int64, Decimal, None]


class SourceType(Enum):
    """Whether a rule binds one object or a sequence of items."""

    OBJECT = "object"
    ENUMERABLE = "enumerable"


class NullBehavior(Enum):
    """How a null bound value is rendered at the target.

    IGNORE leaves the target untouched, EMPTY writes an empty string and
    REMOVE deletes the target attribute (or the element itself for text
    and html targets).
    """

    IGNORE = "ignore"
    EMPTY = "empty"
    REMOVE = "remove"


@dataclass(frozen=True)
class DefaultValue:
    """A configured ``binding-source-default``.

    A rule without a default holds ``None`` instead of an instance, so a
    default of null is ``DefaultValue(value=None)``.
    """

    value: Scalar
