# topmark:header:start
#
#   project      : Csonify
#   file         : errors.py
#   file_relpath : src/csonify/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for Csonify.

These are framework-agnostic: the CLI maps them onto its own Click-aware
exceptions (see `csonify.cli.errors`) at the command boundary.

There is intentionally no "unrepresentable value" error: every Python value
classifies into one of the `ValueKind` categories.
"""

from __future__ import annotations


class CsonifyError(Exception):
    """Base class for all Csonify library errors."""


class ConfigurationError(CsonifyError, ValueError):
    """Invalid serialization settings (depth, indentation, line ending, config file).

    Raised before any output is assembled, so callers never see partial documents.
    """


class InputError(CsonifyError):
    """An input document could not be decoded into a value."""
