# topmark:header:start
#
#   project      : Csonify
#   file         : errors.py
#   file_relpath : src/csonify/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Csonify CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`csonify.core.errors`) are mapped
    onto them at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from csonify.cli.exit_codes import ExitCode


class CsonifyCliError(click.ClickException):
    """Base class for all Csonify CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class CsonifyUsageError(CsonifyCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class CsonifyDataError(CsonifyCliError):
    """Error for input documents that cannot be decoded."""

    exit_code = ExitCode.DATA_ERROR


class CsonifyFileNotFoundError(CsonifyCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CsonifyIOError(CsonifyCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class CsonifyConfigError(CsonifyCliError):
    """Error for invalid settings or config files."""

    exit_code = ExitCode.CONFIG_ERROR
