# topmark:header:start
#
#   project      : Csonify
#   file         : constants.py
#   file_relpath : src/csonify/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Csonify Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version


def _installed_version() -> str:
    try:
        return get_version("csonify")
    except PackageNotFoundError:
        return "0.0.0"


CSONIFY_VERSION: str = _installed_version()

STDIN_SENTINEL: str = "-"
