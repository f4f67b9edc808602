# topmark:header:start
#
#   project      : Csonify
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Config model: TOML tables, merge precedence and freezing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest

from csonify.config.model import MutableConfig, SerializationConfig
from csonify.core.assembler import LineEnding
from csonify.core.errors import ConfigurationError


def test_empty_draft_freezes_to_defaults() -> None:
    assert MutableConfig().freeze() == SerializationConfig()


def test_from_toml_dict_reads_all_keys() -> None:
    draft = MutableConfig.from_toml_dict(
        {"indent": "\t", "depth": 9, "enums-as-strings": True, "line-ending": "crlf"}
    )
    assert draft.indent_unit == "\t"
    assert draft.max_depth == 9
    assert draft.enums_as_strings is True
    assert draft.line_ending is LineEnding.CRLF


def test_indent_width() -> None:
    assert MutableConfig.from_toml_dict({"indent-width": 4}).indent_unit == "    "


def test_indent_wins_over_indent_width(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        draft = MutableConfig.from_toml_dict({"indent": "\t", "indent-width": 4})
    assert draft.indent_unit == "\t"
    assert "both" in caplog.text


def test_unknown_keys_are_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        draft = MutableConfig.from_toml_dict({"colour": "blue"})
    assert draft.freeze() == SerializationConfig()
    assert "colour" in caplog.text


@pytest.mark.parametrize(
    "table",
    [
        {"indent": 2},
        {"indent-width": 0},
        {"indent-width": True},
        {"depth": "3"},
        {"depth": 2.5},
        {"depth": False},
        {"enums-as-strings": "yes"},
        {"line-ending": "unix"},
        {"line-ending": 10},
    ],
)
def test_type_mismatches_are_rejected(table: dict[str, Any]) -> None:
    with pytest.raises(ConfigurationError):
        MutableConfig.from_toml_dict(table, config_file=Path("csonify.toml"))


def test_out_of_range_values_fail_on_freeze() -> None:
    draft = MutableConfig.from_toml_dict({"depth": 500})
    with pytest.raises(ConfigurationError):
        draft.freeze()


def test_merge_with_is_last_wins_for_set_values() -> None:
    base = MutableConfig(indent_unit="\t", max_depth=4, config_files=[Path("a.toml")])
    top = MutableConfig(max_depth=8, enums_as_strings=True, config_files=[Path("b.toml")])
    merged = base.merge_with(top)
    assert merged.indent_unit == "\t"
    assert merged.max_depth == 8
    assert merged.enums_as_strings is True
    assert merged.config_files == [Path("a.toml"), Path("b.toml")]


def test_resolve_line_ending() -> None:
    assert MutableConfig().resolve_line_ending(LineEnding.CR) is LineEnding.CR
    assert MutableConfig(line_ending=LineEnding.LF).resolve_line_ending(LineEnding.CR) is (
        LineEnding.LF
    )
    assert MutableConfig().resolve_line_ending() is LineEnding.native()
