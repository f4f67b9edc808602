# topmark:header:start
#
#   project      : Csonify
#   file         : main.py
#   file_relpath : src/csonify/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Csonify command group.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the console; subcommands read them from there.
"""

from __future__ import annotations

import click

from csonify.cli.commands.convert import convert_command
from csonify.cli.commands.version import version_command
from csonify.cli.console import ClickConsole
from csonify.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from csonify.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    ``CSONIFY_LOG_LEVEL`` takes precedence over ``-v``/``-q`` when set.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Csonify: convert JSON and TOML documents to CSON.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the Csonify CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'csonify convert [INPUT]' to convert a document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(convert_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
