# topmark:header:start
#
#   project      : Csonify
#   file         : model.py
#   file_relpath : src/csonify/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `SerializationConfig`: the immutable settings a single conversion runs with.
    - `MutableConfig`: a mutable builder used while layering defaults, config
      files and CLI overrides; it can be frozen into `SerializationConfig` and
      thawed back for edits.

TOML I/O lives in `csonify.config.io` to keep this module import-light.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

from csonify.config.keys import Toml
from csonify.config.logging import get_logger
from csonify.core.assembler import LineEnding
from csonify.core.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from csonify.config.logging import CsonifyLogger

logger: CsonifyLogger = get_logger(__name__)

MIN_DEPTH: Final[int] = 1
MAX_DEPTH: Final[int] = 100

DEFAULT_INDENT: Final[str] = "  "
DEFAULT_DEPTH: Final[int] = 2
DEFAULT_ENUMS_AS_STRINGS: Final[bool] = False


@dataclass(frozen=True, slots=True)
class SerializationConfig:
    """Immutable settings for one conversion.

    Attributes:
        indent_unit (str): Text prepended once per nesting level. Must be non-empty.
        max_depth (int): Nesting level at which compound values are rendered as
            strings instead of being expanded. Must be within ``[1, 100]``.
        enums_as_strings (bool): Render enum members by name instead of by ordinal.

    Raises:
        ConfigurationError: On construction, if a field is out of range.
    """

    indent_unit: str = DEFAULT_INDENT
    max_depth: int = DEFAULT_DEPTH
    enums_as_strings: bool = DEFAULT_ENUMS_AS_STRINGS

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check field ranges.

        Raises:
            ConfigurationError: If ``max_depth`` is not an int within ``[1, 100]``
                or ``indent_unit`` is not a non-empty string.
        """
        depth: Any = self.max_depth
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise ConfigurationError(f"Depth must be an integer, got {depth!r}")
        if not MIN_DEPTH <= depth <= MAX_DEPTH:
            raise ConfigurationError(
                f"Depth must be between {MIN_DEPTH} and {MAX_DEPTH}, got {depth}"
            )
        indent: Any = self.indent_unit
        if not isinstance(indent, str) or not indent:
            raise ConfigurationError("Indent must be a non-empty string")

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            indent_unit=self.indent_unit,
            max_depth=self.max_depth,
            enums_as_strings=self.enums_as_strings,
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while merging defaults, files and overrides.

    ``None`` means "inherit": the field is filled by a lower layer or by the
    built-in default when frozen.

    Attributes:
        indent_unit (str | None): Indentation unit.
        max_depth (int | None): Maximum expansion depth.
        enums_as_strings (bool | None): Enum rendering mode.
        line_ending (LineEnding | None): Terminator used when writing documents.
        config_files (list[Path]): Config files that contributed to this draft.
    """

    indent_unit: str | None = None
    max_depth: int | None = None
    enums_as_strings: bool | None = None
    line_ending: LineEnding | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    def freeze(self) -> SerializationConfig:
        """Freeze this builder into a validated `SerializationConfig`.

        Raises:
            ConfigurationError: If the merged values are out of range.
        """
        return SerializationConfig(
            indent_unit=self.indent_unit if self.indent_unit is not None else DEFAULT_INDENT,
            max_depth=self.max_depth if self.max_depth is not None else DEFAULT_DEPTH,
            enums_as_strings=(
                self.enums_as_strings
                if self.enums_as_strings is not None
                else DEFAULT_ENUMS_AS_STRINGS
            ),
        )

    def resolve_line_ending(self, default: LineEnding | None = None) -> LineEnding:
        """Return the configured line ending, falling back to ``default`` or the native one."""
        if self.line_ending is not None:
            return self.line_ending
        return default if default is not None else LineEnding.native()

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where set values from ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: The merged draft.
        """
        return MutableConfig(
            indent_unit=other.indent_unit if other.indent_unit is not None else self.indent_unit,
            max_depth=other.max_depth if other.max_depth is not None else self.max_depth,
            enums_as_strings=(
                other.enums_as_strings
                if other.enums_as_strings is not None
                else self.enums_as_strings
            ),
            line_ending=other.line_ending if other.line_ending is not None else self.line_ending,
            config_files=[*self.config_files, *other.config_files],
        )

    @classmethod
    def from_toml_dict(
        cls,
        table: Mapping[str, Any],
        *,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Build a draft from a ``[csonify]`` TOML table.

        Unknown keys are logged and ignored.

        Args:
            table (Mapping[str, Any]): The parsed table.
            config_file (Path | None): Source file, used in messages and recorded
                in ``config_files``.

        Returns:
            MutableConfig: The draft holding the values present in ``table``.

        Raises:
            ConfigurationError: If a known key holds a value of the wrong type.
        """
        source: str = str(config_file) if config_file is not None else "<dict>"
        draft = cls(config_files=[config_file] if config_file is not None else [])

        for key in table:
            if key not in Toml.ALL_KEYS:
                logger.warning("Ignoring unknown key %r in %s", key, source)

        if Toml.KEY_INDENT_WIDTH in table:
            width: Any = table[Toml.KEY_INDENT_WIDTH]
            if isinstance(width, bool) or not isinstance(width, int) or width < 1:
                raise ConfigurationError(
                    f"{source}: '{Toml.KEY_INDENT_WIDTH}' must be a positive integer"
                )
            draft.indent_unit = " " * width

        if Toml.KEY_INDENT in table:
            indent: Any = table[Toml.KEY_INDENT]
            if not isinstance(indent, str):
                raise ConfigurationError(f"{source}: '{Toml.KEY_INDENT}' must be a string")
            if Toml.KEY_INDENT_WIDTH in table:
                logger.warning(
                    "%s: both '%s' and '%s' set; using '%s'",
                    source,
                    Toml.KEY_INDENT,
                    Toml.KEY_INDENT_WIDTH,
                    Toml.KEY_INDENT,
                )
            draft.indent_unit = indent

        if Toml.KEY_DEPTH in table:
            depth: Any = table[Toml.KEY_DEPTH]
            if isinstance(depth, bool) or not isinstance(depth, int):
                raise ConfigurationError(f"{source}: '{Toml.KEY_DEPTH}' must be an integer")
            draft.max_depth = int(depth)

        if Toml.KEY_ENUMS_AS_STRINGS in table:
            flag: Any = table[Toml.KEY_ENUMS_AS_STRINGS]
            if not isinstance(flag, bool):
                raise ConfigurationError(
                    f"{source}: '{Toml.KEY_ENUMS_AS_STRINGS}' must be a boolean"
                )
            draft.enums_as_strings = flag

        if Toml.KEY_LINE_ENDING in table:
            raw: Any = table[Toml.KEY_LINE_ENDING]
            ending: LineEnding | None = (
                LineEnding.from_name(raw) if isinstance(raw, str) else None
            )
            if ending is None:
                raise ConfigurationError(
                    f"{source}: '{Toml.KEY_LINE_ENDING}' must be one of "
                    "'native', 'lf', 'crlf', 'cr'"
                )
            draft.line_ending = ending

        logger.debug("Config draft from %s: %s", source, draft)
        return draft
