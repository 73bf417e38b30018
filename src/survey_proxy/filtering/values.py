"""Tagged value kinds for answer and clause values.

Answer values come straight from upstream JSON, so they can be any JSON
type. Comparisons first classify both sides into a ``ValueKind`` and only
compare values of the same kind:

* equality is strict: ``1 == 1.0`` holds, ``True == 1`` and ``"1" == 1`` do not;
* ordering is defined for numbers, strings and booleans against their own
  kind; every cross-kind ordering is ``False``;
* arrays and objects (``OTHER``) never equal or order against anything.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    OTHER = "other"


_ORDERED_KINDS = frozenset({ValueKind.BOOLEAN, ValueKind.NUMBER, ValueKind.STRING})


def kind_of(value: Any) -> ValueKind:
    if value is None:
        return ValueKind.NULL
    # bool is a subclass of int; check it first.
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    return ValueKind.OTHER


def strictly_equal(left: Any, right: Any) -> bool:
    """Equality without coercion between kinds."""
    kind = kind_of(left)
    if kind is ValueKind.OTHER or kind is not kind_of(right):
        return False
    return bool(left == right)


def orderable(left: Any, right: Any) -> bool:
    """True when ``left`` and ``right`` share a kind with a native ordering."""
    kind = kind_of(left)
    return kind in _ORDERED_KINDS and kind is kind_of(right)
