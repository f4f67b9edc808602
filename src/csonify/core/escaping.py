# topmark:header:start
#
#   project      : Csonify
#   file         : escaping.py
#   file_relpath : src/csonify/core/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String literal and property name escaping for CSON output.

CSON strings are CoffeeScript double-quoted strings, which means that besides the
usual JSON escapes the interpolation opener ``#{`` must be escaped as well.
"""

from __future__ import annotations

import re
from typing import Final

# Control characters, the Unicode line terminators, and the characters that
# must be backslash-prefixed. ``#{`` is matched as a unit.
_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(r'[\x00-\x1f\x85\u2028\u2029"\\]|#\{')

_NAMED_ESCAPES: Final[dict[str, str]] = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\f": "\\f",
    "\b": "\\b",
    '"': '\\"',
    "\\": "\\\\",
    "#{": "\\#{",
}


def _escape_match(match: re.Match[str]) -> str:
    token: str = match.group(0)
    named: str | None = _NAMED_ESCAPES.get(token)
    if named is not None:
        return named
    return f"\\u{ord(token):04X}"


def write_string_literal(text: str) -> str:
    """Render ``text`` as a double-quoted CSON string literal.

    Args:
        text (str): Raw string value.

    Returns:
        str: The quoted and escaped literal.
    """
    return f'"{_ESCAPE_RE.sub(_escape_match, text)}"'


def is_bare_property_name(name: str) -> bool:
    """Return True if ``name`` can be written as an unquoted property name.

    A bare name starts with a letter or underscore and contains only letters,
    decimal digits, and underscores.
    """
    if not name:
        return False
    first: str = name[0]
    if not (first.isalpha() or first == "_"):
        return False
    return all(ch.isalpha() or ch.isdecimal() or ch == "_" for ch in name[1:])


def write_property_name(name: str) -> str:
    """Render a property name, quoting it only when it is not a bare identifier."""
    if is_bare_property_name(name):
        return name
    return write_string_literal(name)
