# topmark:header:start
#
#   project      : Csonify
#   file         : keys.py
#   file_relpath : src/csonify/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for Csonify configuration.

Keys defined here are the external configuration API as it appears in
``csonify.toml`` and in ``[tool.csonify]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML file names, sections and keys used by Csonify configuration."""

    CONFIG_FILE_NAME: Final[str] = "csonify.toml"
    PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

    # [tool.csonify] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_CSONIFY: Final[str] = "csonify"

    KEY_INDENT: Final[str] = "indent"
    KEY_INDENT_WIDTH: Final[str] = "indent-width"
    KEY_DEPTH: Final[str] = "depth"
    KEY_ENUMS_AS_STRINGS: Final[str] = "enums-as-strings"
    KEY_LINE_ENDING: Final[str] = "line-ending"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_INDENT, KEY_INDENT_WIDTH, KEY_DEPTH, KEY_ENUMS_AS_STRINGS, KEY_LINE_ENDING}
    )
