# topmark:header:start
#
#   project      : Csonify
#   file         : api.py
#   file_relpath : src/csonify/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public conversion API.

Example:
    ```python
    from csonify import SerializationConfig, convert

    text = convert({"a": [1, 2, 3]}, SerializationConfig(indent_unit="  ", max_depth=2))
    assert text == "a: [\\n  1\\n  2\\n  3\\n]"
    ```

The line terminator is a parameter: the library never picks the host's native
convention on its own. Use ``LineEnding.native()`` to opt in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from csonify.config.logging import get_logger
from csonify.config.model import SerializationConfig
from csonify.core.assembler import LineEnding, assemble, check_newline
from csonify.core.emitter import CsonEmitter

if TYPE_CHECKING:
    from csonify.config.logging import CsonifyLogger

logger: CsonifyLogger = get_logger(__name__)


def convert_lines(value: object, config: SerializationConfig | None = None) -> list[str]:
    """Convert ``value`` to CSON and return the document lines.

    Args:
        value (object): Any Python value.
        config (SerializationConfig | None): Conversion settings (defaults if None).

    Returns:
        list[str]: The document lines, without terminators.

    Raises:
        ConfigurationError: If ``config`` holds out-of-range settings.
    """
    settings: SerializationConfig = config if config is not None else SerializationConfig()
    settings.validate()
    logger.debug("Converting %s with %s", type(value).__name__, settings)
    return CsonEmitter(settings).emit_root(value)


def convert(
    value: object,
    config: SerializationConfig | None = None,
    *,
    newline: str = LineEnding.LF.value,
) -> str:
    """Convert ``value`` to a CSON document.

    Settings and the line terminator are validated before emission starts, so
    an error never comes with partial output.

    Args:
        value (object): Any Python value.
        config (SerializationConfig | None): Conversion settings (defaults if None).
        newline (str): Line terminator, one of the `LineEnding` values.

    Returns:
        str: The CSON text, without a trailing terminator.

    Raises:
        ConfigurationError: If ``config`` or ``newline`` is invalid.
    """
    check_newline(newline)
    return assemble(convert_lines(value, config), newline)
