# topmark:header:start
#
#   project      : Csonify
#   file         : cson_reader.py
#   file_relpath : tests/cson_reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reference reader for CoffeeScript double-quoted string literals.

Used by property tests to check that escaped literals read back to the
original text. The reader is strict: it rejects raw line terminators (which
CoffeeScript would fold), unescaped quotes and unescaped ``#{`` (which would
start an interpolation).
"""

from __future__ import annotations

from typing import Final

_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "f": "\f",
    "b": "\b",
    "v": "\v",
    "0": "\0",
}

_RAW_FORBIDDEN: Final[frozenset[str]] = frozenset("\n\r\u2028\u2029")


class LiteralSyntaxError(ValueError):
    """Raised when a literal is not a well-formed, interpolation-free string."""


def read_string_literal(literal: str) -> str:
    """Return the text denoted by a double-quoted CoffeeScript string literal.

    Raises:
        LiteralSyntaxError: If ``literal`` is malformed.
    """
    if len(literal) < 2 or literal[0] != '"' or literal[-1] != '"':
        raise LiteralSyntaxError(f"not a double-quoted literal: {literal!r}")
    body: str = literal[1:-1]
    out: list[str] = []
    i = 0
    while i < len(body):
        ch: str = body[i]
        if ch == "\\":
            if i + 1 >= len(body):
                raise LiteralSyntaxError("dangling backslash")
            nxt: str = body[i + 1]
            if nxt == "u":
                digits: str = body[i + 2 : i + 6]
                if len(digits) != 4:
                    raise LiteralSyntaxError("short unicode escape")
                out.append(chr(int(digits, 16)))
                i += 6
                continue
            if nxt == "x":
                out.append(chr(int(body[i + 2 : i + 4], 16)))
                i += 4
                continue
            out.append(_SIMPLE_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        if ch == '"':
            raise LiteralSyntaxError("unescaped quote")
        if ch == "#" and body[i + 1 : i + 2] == "{":
            raise LiteralSyntaxError("unescaped interpolation")
        if ch in _RAW_FORBIDDEN:
            raise LiteralSyntaxError("raw line terminator")
        out.append(ch)
        i += 1
    return "".join(out)
