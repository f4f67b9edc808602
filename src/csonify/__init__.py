# topmark:header:start
#
#   project      : Csonify
#   file         : __init__.py
#   file_relpath : src/csonify/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Csonify package.

Csonify converts in-memory Python values (scalars, sequences, mappings, enums,
dates and arbitrary records) into CSON, the CoffeeScript Object Notation used
for hand-editable configuration and grammar files. It exposes a small typed API
and a ``csonify`` command line tool.
"""

from __future__ import annotations

from csonify.api import convert, convert_lines
from csonify.config.model import MutableConfig, SerializationConfig
from csonify.core.assembler import LineEnding
from csonify.core.errors import ConfigurationError, CsonifyError, InputError
from csonify.core.values import CsonRecord, ValueKind, classify

__all__ = [
    "ConfigurationError",
    "CsonRecord",
    "CsonifyError",
    "InputError",
    "LineEnding",
    "MutableConfig",
    "SerializationConfig",
    "ValueKind",
    "classify",
    "convert",
    "convert_lines",
]
