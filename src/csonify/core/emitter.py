# topmark:header:start
#
#   project      : Csonify
#   file         : emitter.py
#   file_relpath : src/csonify/core/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive CSON emitter.

The emitter walks a value graph and produces CSON lines:

- mappings become ``key: value`` lines, with nested mappings indented one
  unit deeper under a ``key:`` line;
- sequences become ``[`` ... ``]`` blocks with one element per line, and
  mapping elements wrapped in ``{`` ... ``}``;
- scalars are rendered inline.

Nesting is bounded by ``SerializationConfig.max_depth``: at that level a
compound value is rendered as the quoted string of its default text instead of
being expanded. This is also what keeps cyclic graphs finite.

The root value is emitted at level ``-1`` with no indentation, so the direct
children of a root mapping start at column 0 (``a: [`` for ``{"a": [...]}``),
not one indentation unit in.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Final

from csonify.config.logging import get_logger
from csonify.core.escaping import write_property_name, write_string_literal
from csonify.core.values import (
    ValueKind,
    classify,
    default_text,
    enum_name,
    enum_ordinal,
    mapping_items,
)

if TYPE_CHECKING:
    import datetime
    from enum import Enum

    from csonify.config.logging import CsonifyLogger
    from csonify.config.model import SerializationConfig

logger: CsonifyLogger = get_logger(__name__)

ROOT_LEVEL: Final[int] = -1


def should_expand(level: int, max_depth: int) -> bool:
    """Return True if a compound value at ``level`` is expanded into child lines."""
    return level < max_depth


def render_number(value: Any) -> str:
    """Canonical decimal text of a number (CoffeeScript spelling for non-finite floats)."""
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "-Infinity" if value.is_signed() else "Infinity"
        return str(value)
    number: float = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "-Infinity" if number < 0 else "Infinity"
    return repr(number)


class CsonEmitter:
    """Turn values into CSON lines under a fixed `SerializationConfig`.

    Args:
        config (SerializationConfig): Indentation, depth and enum settings.
    """

    def __init__(self, config: SerializationConfig) -> None:
        self.config: SerializationConfig = config

    def emit_root(self, value: object) -> list[str]:
        """Emit a whole document for ``value``."""
        return self.emit(None, value, "", ROOT_LEVEL)

    def render_scalar(self, value: object, kind: ValueKind) -> str:
        """Render a value inline.

        Compound kinds only reach this method when depth-truncated. They are
        rendered like `TEXT` values, as the quoted default text of the value.

        Args:
            value (object): The value.
            kind (ValueKind): Its category, as returned by `classify`.

        Returns:
            str: A single CSON token.
        """
        if kind is ValueKind.NULL:
            return "null"
        if kind is ValueKind.BOOL:
            return "true" if value else "false"
        if kind is ValueKind.NUMBER:
            return render_number(value)
        if kind is ValueKind.DATETIME:
            stamp: datetime.date | datetime.time = value  # type: ignore[assignment]
            return write_string_literal(stamp.isoformat())
        if kind is ValueKind.ENUM:
            member: Enum = value  # type: ignore[assignment]
            if self.config.enums_as_strings:
                return write_string_literal(enum_name(member))
            return str(enum_ordinal(member))
        if kind is ValueKind.STRING:
            return write_string_literal(value)  # type: ignore[arg-type]
        return write_string_literal(default_text(value))

    def emit(self, name: str | None, value: object, indent: str, level: int) -> list[str]:
        """Emit the lines for one (optionally named) value.

        Args:
            name (str | None): Property name, or None for root values and
                sequence elements.
            value (object): The value to render.
            indent (str): Indentation prefix of this value's own line.
            level (int): Nesting level; ``-1`` for the document root.

        Returns:
            list[str]: The output lines, in document order.
        """
        kind: ValueKind = classify(value)
        expand: bool = not kind.is_scalar and should_expand(level, self.config.max_depth)
        prefix: str = indent if name is None else f"{indent}{write_property_name(name)}:"

        if not expand:
            if not kind.is_scalar:
                logger.trace(
                    "Depth limit %d reached at level %d; rendering %s as string",
                    self.config.max_depth,
                    level,
                    kind.value,
                )
            token: str = self.render_scalar(value, kind)
            return [f"{prefix} {token}" if name is not None else f"{prefix}{token}"]

        if kind is ValueKind.SEQUENCE:
            return self._emit_sequence(prefix, name, value, indent, level)
        return self._emit_mapping(prefix, name, value, indent, level)

    def _emit_sequence(
        self,
        prefix: str,
        name: str | None,
        value: Any,
        indent: str,
        level: int,
    ) -> list[str]:
        inner: str = indent + self.config.indent_unit
        lines: list[str] = [f"{prefix} [" if name is not None else f"{prefix}["]

        for element in value:
            element_kind: ValueKind = classify(element)
            if element_kind is ValueKind.MAPPING and should_expand(
                level + 1, self.config.max_depth
            ):
                lines.append(f"{inner}{{")
                lines.extend(self._emit_children(element, inner, level + 1))
                lines.append(f"{inner}}}")
            else:
                lines.extend(self.emit(None, element, inner, level + 1))

        lines.append(f"{indent}]")
        return lines

    def _emit_mapping(
        self,
        prefix: str,
        name: str | None,
        value: object,
        indent: str,
        level: int,
    ) -> list[str]:
        children: list[str] = self._emit_children(value, indent, level)
        if not children:
            return [f"{prefix} {{}}" if name is not None else f"{prefix}{{}}"]
        if name is None:
            return children
        return [prefix, *children]

    def _emit_children(self, value: object, indent: str, level: int) -> list[str]:
        child_indent: str = indent if level == ROOT_LEVEL else indent + self.config.indent_unit
        lines: list[str] = []
        for key, child in mapping_items(value):
            lines.extend(self.emit(key, child, child_indent, level + 1))
        return lines
