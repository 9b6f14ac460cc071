"""Display rendering for values embedded in failure messages."""

from __future__ import annotations

from collections.abc import Mapping, Set
from typing import Any


def stringify(value: Any) -> str:
    """Render ``value`` as display text.

    Strings are kept as-is, lists and tuples become ``[a, b]``, sets are sorted
    when their elements allow it, and mappings become ``{k: v}``. Nested
    containers are rendered recursively.
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        return value
    if isinstance(value, bytes | bytearray):
        return repr(bytes(value))
    if isinstance(value, Mapping):
        items = ", ".join(f"{stringify(key)}: {stringify(item)}" for key, item in value.items())
        return "{" + items + "}"
    if isinstance(value, Set):
        return _join(_ordered(value))
    if isinstance(value, list | tuple | range):
        return _join(value)
    return str(value)


def _join(values: Any) -> str:
    return "[" + ", ".join(stringify(item) for item in values) + "]"


def _ordered(values: Set[Any]) -> list[Any]:
    try:
        return sorted(values)
    except TypeError:
        return sorted(values, key=stringify)
