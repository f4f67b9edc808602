# topmark:header:start
#
#   project      : Csonify
#   file         : __main__.py
#   file_relpath : src/csonify/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Csonify via ``python -m csonify``.

Delegates to `csonify.cli.main.cli`, the same entry point as the
``csonify`` console script.

Examples:
    Convert a JSON document read from STDIN::

        echo '{"a": [1, 2]}' | python -m csonify convert
"""

from __future__ import annotations

from csonify.cli.main import cli

if __name__ == "__main__":
    cli()
