# topmark:header:start
#
#   project      : Csonify
#   file         : inputs.py
#   file_relpath : src/csonify/cli/inputs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode input documents into values for conversion.

JSON is parsed with the standard library; objects are kept as ordered pair
lists wrapped in `OrderedPairs` so duplicate keys pass through verbatim, and
arrays as `JsonArray`. TOML is parsed with `tomlkit`, which keeps dates and
times as `datetime` values, and its tables and arrays get the same wrappers.
Both wrappers print as JSON when written as depth-truncated text.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from csonify.config.logging import get_logger
from csonify.core.errors import InputError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from csonify.config.logging import CsonifyLogger

logger: CsonifyLogger = get_logger(__name__)


class InputFormat(str, Enum):
    """Supported input document formats."""

    AUTO = "auto"
    JSON = "json"
    TOML = "toml"

    @classmethod
    def for_path(cls, path: Path | None) -> InputFormat:
        """Pick a concrete format from a file suffix (JSON when unknown or STDIN)."""
        if path is not None and path.suffix.lower() == ".toml":
            return cls.TOML
        return cls.JSON


class JsonArray(list):  # type: ignore[type-arg]
    """A decoded JSON array; its text form is JSON, like `OrderedPairs`."""

    def __str__(self) -> str:
        return json.dumps(_plain(self), ensure_ascii=False, default=_json_default)


class OrderedPairs:
    """A decoded JSON object: its members in document order, duplicates included."""

    __slots__ = ("pairs",)

    def __init__(self, pairs: Iterable[tuple[str, Any]]) -> None:
        self.pairs: list[tuple[str, Any]] = list(pairs)

    def __cson_items__(self) -> list[tuple[str, Any]]:
        return self.pairs

    def __str__(self) -> str:
        return json.dumps(_plain(self), ensure_ascii=False, default=_json_default)

    def __repr__(self) -> str:
        return f"OrderedPairs({self.pairs!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedPairs):
            return self.pairs == other.pairs
        return NotImplemented


def _plain(value: Any) -> Any:
    # Last duplicate wins here; only used for the text of depth-truncated objects.
    if isinstance(value, OrderedPairs):
        return {key: _plain(child) for key, child in value.pairs}
    if isinstance(value, list):
        return [_plain(child) for child in value]
    return value


def _json_default(value: Any) -> Any:
    # TOML dates and times.
    isoformat = getattr(value, "isoformat", None)
    if callable(isoformat):
        return isoformat()
    return str(value)


def _wrap_compounds(value: Any) -> Any:
    if isinstance(value, OrderedPairs):
        value.pairs = [(key, _wrap_compounds(child)) for key, child in value.pairs]
        return value
    if isinstance(value, dict):
        return OrderedPairs((str(key), _wrap_compounds(child)) for key, child in value.items())
    if isinstance(value, list):
        return JsonArray(_wrap_compounds(child) for child in value)
    return value


def decode_json(text: str) -> Any:
    """Decode a JSON document, preserving member order and duplicate keys.

    Arrays become `JsonArray` so that depth-truncated values read as JSON.

    Raises:
        InputError: If ``text`` is not valid JSON.
    """
    try:
        decoded: Any = json.loads(text, object_pairs_hook=OrderedPairs)
    except json.JSONDecodeError as exc:
        raise InputError(f"Invalid JSON: {exc}") from exc
    return _wrap_compounds(decoded)


def decode_toml(text: str) -> Any:
    """Decode a TOML document into `OrderedPairs`, `JsonArray` and scalar values.

    Raises:
        InputError: If ``text`` is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise InputError(f"Invalid TOML: {exc}") from exc
    return _wrap_compounds(doc.unwrap())


def decode_document(text: str, fmt: InputFormat) -> Any:
    """Decode ``text`` in the given concrete format."""
    logger.debug("Decoding %d characters as %s", len(text), fmt.value)
    if fmt is InputFormat.TOML:
        return decode_toml(text)
    return decode_json(text)
