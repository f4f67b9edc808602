# topmark:header:start
#
#   project      : Csonify
#   file         : convert.py
#   file_relpath : src/csonify/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Csonify `convert` command.

Reads a JSON or TOML document from a file or STDIN and writes it as CSON.

Settings are layered: built-in defaults, then the discovered config file
(``csonify.toml`` or ``[tool.csonify]`` in ``pyproject.toml``), then files
given with ``--config``, then the command-line flags.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from csonify.api import convert
from csonify.cli.errors import (
    CsonifyConfigError,
    CsonifyDataError,
    CsonifyFileNotFoundError,
    CsonifyIOError,
    CsonifyUsageError,
)
from csonify.cli.inputs import InputFormat, decode_document
from csonify.config.io import load_config
from csonify.config.logging import get_logger
from csonify.config.model import MutableConfig
from csonify.constants import STDIN_SENTINEL
from csonify.core.assembler import LineEnding
from csonify.core.errors import ConfigurationError, InputError

if TYPE_CHECKING:
    from csonify.cli.console import ClickConsole
    from csonify.config.logging import CsonifyLogger
    from csonify.config.model import SerializationConfig

logger: CsonifyLogger = get_logger(__name__)

_LINE_ENDING_CHOICES: tuple[str, ...] = ("native", "lf", "crlf", "cr")


def resolve_indent(indent: str | None, indent_width: int | None, tab: bool) -> str | None:
    """Return the indentation unit selected on the command line, or None.

    Raises:
        CsonifyUsageError: If more than one indentation option was given.
    """
    given: int = sum(1 for opt in (indent is not None, indent_width is not None, tab) if opt)
    if given > 1:
        raise CsonifyUsageError(
            "The '--indent', '--indent-width' and '--tab' options are mutually exclusive."
        )
    if tab:
        return "\t"
    if indent_width is not None:
        return " " * indent_width
    return indent


def build_config(
    *,
    config_files: tuple[str, ...],
    no_config: bool,
    overrides: MutableConfig,
) -> tuple[SerializationConfig, LineEnding]:
    """Merge config sources and CLI overrides into the effective settings.

    Raises:
        CsonifyConfigError: If a config file is invalid or the merged settings are out of range.
    """
    try:
        draft: MutableConfig = load_config(
            extra_config_files=[Path(p) for p in config_files],
            use_discovery=not no_config,
        ).merge_with(overrides)
        settings: SerializationConfig = draft.freeze()
    except ConfigurationError as exc:
        raise CsonifyConfigError(str(exc)) from exc
    if draft.config_files:
        logger.info("Using config files: %s", ", ".join(str(p) for p in draft.config_files))
    return settings, draft.resolve_line_ending()


def read_input(source: str) -> tuple[str, Path | None]:
    """Read the input document text from a path or STDIN (``-``).

    Returns:
        tuple[str, Path | None]: The text and the source path (None for STDIN).
    """
    if source == STDIN_SENTINEL:
        return click.get_text_stream("stdin").read(), None
    path = Path(source)
    if not path.exists():
        raise CsonifyFileNotFoundError(f"Input file not found: {source}")
    try:
        return path.read_text(encoding="utf-8"), path
    except UnicodeDecodeError as exc:
        raise CsonifyDataError(f"Input file is not valid UTF-8: {source}: {exc}") from exc
    except OSError as exc:
        raise CsonifyIOError(f"Cannot read input file {source}: {exc}") from exc


@click.command(
    name="convert",
    help="Convert a JSON or TOML document (file or STDIN) to CSON.",
)
@click.argument("source", metavar="[INPUT]", required=False, default=STDIN_SENTINEL)
@click.option(
    "-o",
    "--output",
    "output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the CSON document to this file instead of STDOUT.",
)
@click.option(
    "--format",
    "input_format",
    type=click.Choice([f.value for f in InputFormat], case_sensitive=False),
    default=InputFormat.AUTO.value,
    show_default=True,
    help="Input format; 'auto' picks TOML for '.toml' files and JSON otherwise.",
)
@click.option("--indent", "indent", default=None, help="Indentation unit (e.g. '    ').")
@click.option(
    "--indent-width",
    "indent_width",
    type=click.IntRange(min=1),
    default=None,
    help="Indent with this many spaces.",
)
@click.option("--tab", "tab", is_flag=True, default=False, help="Indent with a tab character.")
@click.option(
    "--depth",
    "depth",
    type=int,
    default=None,
    help="Nesting level at which values are written as strings (1-100).",
)
@click.option(
    "--enums-as-strings/--enums-as-ordinals",
    "enums_as_strings",
    default=None,
    help="Render enum members by name or by ordinal.",
)
@click.option(
    "--line-ending",
    "line_ending",
    type=click.Choice(_LINE_ENDING_CHOICES, case_sensitive=False),
    default=None,
    help="Line terminator of the output document (default: native).",
)
@click.option(
    "--config",
    "config_files",
    type=click.Path(dir_okay=False),
    multiple=True,
    help="Extra TOML config file(s), applied after the discovered one.",
)
@click.option(
    "--no-config",
    "no_config",
    is_flag=True,
    default=False,
    help="Do not look for csonify.toml / pyproject.toml.",
)
def convert_command(
    *,
    source: str,
    output: str | None,
    input_format: str,
    indent: str | None,
    indent_width: int | None,
    tab: bool,
    depth: int | None,
    enums_as_strings: bool | None,
    line_ending: str | None,
    config_files: tuple[str, ...],
    no_config: bool,
) -> None:
    """Convert a JSON or TOML document to CSON."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    overrides = MutableConfig(
        indent_unit=resolve_indent(indent, indent_width, tab),
        max_depth=depth,
        enums_as_strings=enums_as_strings,
        line_ending=LineEnding.from_name(line_ending),
    )
    settings, newline = build_config(
        config_files=config_files,
        no_config=no_config,
        overrides=overrides,
    )

    text, path = read_input(source)
    fmt = InputFormat(input_format.lower())
    if fmt is InputFormat.AUTO:
        fmt = InputFormat.for_path(path)

    try:
        value: Any = decode_document(text, fmt)
    except InputError as exc:
        raise CsonifyDataError(f"{source}: {exc}") from exc

    try:
        document: str = convert(value, settings, newline=newline.value) + newline.value
    except ConfigurationError as exc:
        raise CsonifyConfigError(str(exc)) from exc

    if output is None:
        console.write_raw(document)
        return
    try:
        Path(output).write_text(document, encoding="utf-8", newline="")
    except OSError as exc:
        raise CsonifyIOError(f"Cannot write output file {output}: {exc}") from exc
    logger.info("Wrote %s", output)
