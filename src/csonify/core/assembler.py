# topmark:header:start
#
#   project      : Csonify
#   file         : assembler.py
#   file_relpath : src/csonify/core/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Join emitted lines into the final CSON document."""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING

from csonify.core.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable


class LineEnding(str, Enum):
    """Line terminators a document can be assembled with."""

    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"

    @classmethod
    def native(cls) -> LineEnding:
        """Return the line ending of the host platform (``os.linesep``)."""
        return cls(os.linesep)

    @classmethod
    def from_name(cls, key_name: str | None) -> LineEnding | None:
        """Find a member by case-insensitive name; ``"native"`` resolves to the host ending.

        Args:
            key_name (str | None): Name such as ``"lf"``, ``"CRLF"`` or ``"native"``.

        Returns:
            LineEnding | None: The matching member or None if the key is None or unmatched.
        """
        if key_name is None:
            return None
        target_name: str = key_name.strip().upper()
        if target_name == "NATIVE":
            return cls.native()
        return cls.__members__.get(target_name)


def check_newline(newline: str) -> str:
    """Return ``newline`` if it is a supported terminator, else raise ConfigurationError."""
    if newline not in {member.value for member in LineEnding}:
        raise ConfigurationError(f"Unsupported line terminator: {newline!r}")
    return newline


def assemble(lines: Iterable[str], newline: str = LineEnding.LF.value) -> str:
    """Join ``lines`` with a single terminator; no terminator follows the last line.

    Args:
        lines (Iterable[str]): Lines produced by the emitter.
        newline (str): The line terminator (one of the `LineEnding` values).

    Returns:
        str: The assembled document.
    """
    return check_newline(newline).join(lines)
