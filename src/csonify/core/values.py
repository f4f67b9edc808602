# topmark:header:start
#
#   project      : Csonify
#   file         : values.py
#   file_relpath : src/csonify/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value classification for the CSON emitter.

Every Python value maps onto exactly one `ValueKind`. Classification is pure and
total: values that are not recognized as scalars or sequences are treated as
mappings, whose key/value pairs are produced by `mapping_items`. Objects with
no visible members (no public instance attributes or slots) are
classified as `TEXT` and written as the quoted string of their default text.

Record-like objects can take control of their mapping shape by implementing
the `CsonRecord` protocol; otherwise dataclass fields and public instance
attributes are used, in declaration/insertion order.
"""

from __future__ import annotations

import dataclasses
import datetime
import numbers
from collections import deque
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable


class ValueKind(Enum):
    """The categories a value can be rendered as."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    DATETIME = "datetime"
    ENUM = "enum"
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"

    @property
    def is_scalar(self) -> bool:
        """True for kinds that are always rendered inline."""
        return self not in (ValueKind.SEQUENCE, ValueKind.MAPPING)


@runtime_checkable
class CsonRecord(Protocol):
    """Adapter for record-like objects that expose their own ordered fields.

    Example:
        ```python
        class Point:
            def __init__(self, x: int, y: int) -> None:
                self._x, self._y = x, y

            def __cson_items__(self):
                return [("x", self._x), ("y", self._y)]
        ```
    """

    def __cson_items__(self) -> Iterable[tuple[str, Any]]:
        """Return the ordered (name, value) pairs of this record."""
        ...


_SEQUENCE_TYPES: tuple[type, ...] = (Sequence, Set, deque, bytes, bytearray, memoryview)


def classify(value: object) -> ValueKind:
    """Return the category of ``value``.

    Order matters: ``bool`` is an ``int`` subclass and ``IntEnum`` members are
    both enums and ints, so those checks run before the numeric one.

    Args:
        value (object): Any Python value.

    Returns:
        ValueKind: The category used to render ``value``.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, Enum):
        return ValueKind.ENUM
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (datetime.date, datetime.time)):
        return ValueKind.DATETIME
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, _SEQUENCE_TYPES):
        return ValueKind.SEQUENCE
    if _has_members(value):
        return ValueKind.MAPPING
    return ValueKind.TEXT


def enum_name(member: Enum) -> str:
    """Symbolic name of an enum member (composite flags fall back to ``str()``)."""
    name: str | None = member.name
    return name if name is not None else str(member)


def enum_ordinal(member: Enum) -> int:
    """Integer ordinal of an enum member.

    Integer-valued members use their value; any other member uses its
    zero-based position in the enum class.
    """
    raw: object = member.value
    if isinstance(raw, int) and not isinstance(raw, bool):
        return int(raw)
    return list(type(member)).index(member)


def _public_attributes(value: object) -> list[tuple[str, Any]]:
    items: list[tuple[str, Any]] = []
    seen: set[str] = set()
    instance_dict: dict[str, Any] | None = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        for key, child in instance_dict.items():
            if isinstance(key, str) and not key.startswith("_"):
                items.append((key, child))
                seen.add(key)
    for cls in type(value).__mro__:
        slots: object = cls.__dict__.get("__slots__", ())
        names: tuple[str, ...] = (slots,) if isinstance(slots, str) else tuple(slots)  # type: ignore[arg-type]
        for name in names:
            if name.startswith("_") or name in seen or not hasattr(value, name):
                continue
            items.append((name, getattr(value, name)))
            seen.add(name)
    return items


def _has_members(value: object) -> bool:
    # Path, timedelta, complex and most C-extension objects reflect nothing.
    if isinstance(value, CsonRecord) or dataclasses.is_dataclass(value):
        return True
    return bool(_public_attributes(value))


def mapping_items(value: object) -> list[tuple[str, Any]]:
    """Return the ordered (key, value) pairs of a MAPPING-kind value.

    Keys are converted with ``str()``; duplicate keys reported by a
    `CsonRecord` adapter are kept as-is.

    Args:
        value (object): A value for which `classify` returned ``ValueKind.MAPPING``.

    Returns:
        list[tuple[str, Any]]: The key/value pairs in stored or declared order.
    """
    if isinstance(value, CsonRecord) and not isinstance(value, type):
        return [(str(key), child) for key, child in value.__cson_items__()]
    if isinstance(value, Mapping):
        return [(str(key), child) for key, child in value.items()]  # type: ignore[misc]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
    return _public_attributes(value)


def default_text(value: object) -> str:
    """Default textual form of a value, used when a compound value is depth-truncated."""
    return str(value)
