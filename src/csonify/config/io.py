# topmark:header:start
#
#   project      : Csonify
#   file         : io.py
#   file_relpath : src/csonify/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Csonify reads its settings from:
- ``csonify.toml`` (keys at the top level), or
- ``pyproject.toml`` (keys under ``[tool.csonify]``),

discovered by walking upward from the working directory, plus any file passed
explicitly with ``--config``. Parsing is done with `tomlkit` and returned as
plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from csonify.config.keys import Toml
from csonify.config.logging import get_logger
from csonify.config.model import MutableConfig
from csonify.core.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from csonify.config.logging import CsonifyLogger

TomlTable = dict[str, Any]

logger: CsonifyLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise ConfigurationError(f"Invalid TOML in config file {path}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_csonify_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the Csonify settings table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.csonify]``; any other file holds the
    settings at its top level.

    Returns:
        TomlTable | None: The settings, or None if a ``pyproject.toml`` has no
            ``[tool.csonify]`` table.
    """
    if path.name != Toml.PYPROJECT_FILE_NAME:
        return data
    tool_any: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool_any, dict):
        return None
    section: Any = cast("TomlTable", tool_any).get(Toml.SECTION_CSONIFY)
    if not isinstance(section, dict):
        return None
    return cast("TomlTable", section)


def from_toml_file(path: Path) -> MutableConfig | None:
    """Load a config draft from a single TOML file.

    Args:
        path (Path): ``csonify.toml``, ``pyproject.toml`` or any TOML file.

    Returns:
        MutableConfig | None: The draft, or None if the file holds no Csonify settings.
    """
    logger.debug("Loading config from %s", path)
    table: TomlTable | None = extract_csonify_table(load_toml_dict(path), path)
    if table is None:
        logger.debug("No [%s.%s] table in %s", Toml.SECTION_TOOL, Toml.SECTION_CSONIFY, path)
        return None
    return MutableConfig.from_toml_dict(table, config_file=path)


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file, walking upward from ``start``.

    Within one directory ``csonify.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it has a ``[tool.csonify]`` table.

    Args:
        start (Path): Directory to start from.

    Returns:
        Path | None: The config file, or None if none was found.
    """
    for directory in (start, *start.parents):
        candidate: Path = directory / Toml.CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / Toml.PYPROJECT_FILE_NAME
        if pyproject.is_file():
            if extract_csonify_table(load_toml_dict(pyproject), pyproject) is not None:
                return pyproject
    return None


def load_config(
    *,
    start: Path | None = None,
    extra_config_files: Iterable[Path] = (),
    use_discovery: bool = True,
) -> MutableConfig:
    """Build a config draft from discovered and explicit config files.

    Later sources override earlier ones: discovered file, then each extra file
    in the given order. CLI overrides are merged on top by the caller.

    Args:
        start (Path | None): Directory to start discovery from (defaults to CWD).
        extra_config_files (Iterable[Path]): Explicit config files.
        use_discovery (bool): Whether to look for a config file at all.

    Returns:
        MutableConfig: The merged draft (empty if no sources were found).
    """
    draft = MutableConfig()
    if use_discovery:
        found: Path | None = discover_config_file(start or Path.cwd())
        if found is not None:
            loaded: MutableConfig | None = from_toml_file(found)
            if loaded is not None:
                draft = draft.merge_with(loaded)

    for extra in extra_config_files:
        loaded = from_toml_file(extra)
        if loaded is None:
            logger.warning("No Csonify settings found in %s", extra)
            continue
        draft = draft.merge_with(loaded)

    return draft
