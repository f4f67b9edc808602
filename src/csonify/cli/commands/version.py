# topmark:header:start
#
#   project      : Csonify
#   file         : version.py
#   file_relpath : src/csonify/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Csonify `version` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from csonify.constants import CSONIFY_VERSION

if TYPE_CHECKING:
    from csonify.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Csonify.",
)
def version_command() -> None:
    """Print the Csonify version as installed in the current Python environment."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    console.print(console.styled(CSONIFY_VERSION, bold=True))
