# topmark:header:start
#
#   project      : Csonify
#   file         : __init__.py
#   file_relpath : src/csonify/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Csonify configuration: settings model, TOML loading and logging setup."""

from __future__ import annotations

from csonify.config.model import (
    DEFAULT_DEPTH,
    DEFAULT_INDENT,
    MAX_DEPTH,
    MIN_DEPTH,
    MutableConfig,
    SerializationConfig,
)

__all__ = [
    "DEFAULT_DEPTH",
    "DEFAULT_INDENT",
    "MAX_DEPTH",
    "MIN_DEPTH",
    "MutableConfig",
    "SerializationConfig",
]
