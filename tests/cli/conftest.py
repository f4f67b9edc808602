# topmark:header:start
#
#   project      : Csonify
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Csonify through Click's test runner."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import IO, Any

import pytest
from click.testing import CliRunner, Result

from csonify.cli.exit_codes import ExitCode
from csonify.cli.main import cli
from csonify.config import logging


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reattach test logging after each run.

    The CLI points the root handler at the runner's temporary stderr, which is
    closed once the invocation returns.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["convert", "in.json"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
