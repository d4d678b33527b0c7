"""Shape classification of JSON objects.

Splits an object's keys into primitive-valued keys (scalars and null) and
nested-valued keys (objects and arrays), and computes the weighted child
count shown in container badges.  Also renders scalar values as display
text.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

__all__ = [
    "KeyCategories",
    "as_mapping",
    "categorize_keys",
    "child_count",
    "format_field_value",
    "format_number",
    "format_value",
    "is_empty",
    "is_nested",
    "is_primitive",
]


@dataclass(frozen=True, slots=True)
class KeyCategories:
    """Disjoint key lists of one object, each in original key order."""

    primitive_keys: list[str]
    nested_keys: list[str]


def is_nested(value: Any) -> bool:
    """True for objects and arrays (including empty ones)."""
    return isinstance(value, (dict, list))


def is_primitive(value: Any) -> bool:
    """True for null and every non-container value."""
    return not is_nested(value)


def is_empty(value: Any) -> bool:
    """True only for an empty object or an empty array."""
    return is_nested(value) and len(value) == 0


def as_mapping(value: dict[str, Any] | list[Any]) -> dict[str, Any]:
    """View an object as itself and an array as an object keyed by index."""
    if isinstance(value, list):
        return {str(idx): item for idx, item in enumerate(value)}
    return value


def categorize_keys(obj: Mapping[str, Any]) -> KeyCategories:
    """Partition ``obj``'s keys into primitive and nested keys.

    Empty nested values are still classified as nested; callers decide
    whether to skip them.
    """
    primitive_keys: list[str] = []
    nested_keys: list[str] = []
    for key, value in obj.items():
        if is_primitive(value):
            primitive_keys.append(key)
        else:
            nested_keys.append(key)
    return KeyCategories(primitive_keys=primitive_keys, nested_keys=nested_keys)


def child_count(value: Any) -> int:
    """Return how many child nodes a container for ``value`` will spawn.

    An object counts one for all of its primitive fields together (they
    merge into a single leaf) plus one per array or object field.  An array
    counts its length.  Anything else counts zero.

    Example::

        child_count({"a": 1, "b": 2, "c": {"d": 1}, "e": [1]})  # 3
    """
    if isinstance(value, list):
        return len(value)
    if not isinstance(value, dict):
        return 0
    categories = categorize_keys(value)
    return (1 if categories.primitive_keys else 0) + len(categories.nested_keys)


def format_value(value: Any) -> str:
    """Render a JSON value as display text.

    ``None`` -> ``"null"``, booleans -> ``"true"``/``"false"``, numbers
    follow ``format_number``, arrays are comma-joined with null items left
    blank, objects are compact JSON.
    """
    if value is None:
        return "null"
    # bool before numbers: bool subclasses int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, list):
        return ",".join("" if item is None else format_value(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def format_field_value(value: Any) -> str:
    """Render a primitive field for a value annotation; null renders empty."""
    return "" if value is None else format_value(value)


def format_number(value: int | float) -> str:
    """Render a number the way the diagram front-end prints it.

    Example::

        format_number(1.0)           # "1"
        format_number(float("inf"))  # "Infinity"
        format_number(1e-7)          # "1e-7"
        format_number(1.5e21)        # "1.5e+21"
    """
    if isinstance(value, int):
        if abs(value) < 1e21:
            return str(value)
        try:
            value = float(value)
        except OverflowError:
            return "Infinity" if value > 0 else "-Infinity"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) < 1e21 and value.is_integer():
        return str(int(value))

    # repr() yields the shortest round-tripping digits; only the layout differs.
    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0") or "0"
    point = len(digit_tuple) + int(exponent)
    prefix = "-" if sign else ""
    if 0 < point <= 21:
        return prefix + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return prefix + "0." + "0" * -point + digits
    power = point - 1
    mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{prefix}{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"
