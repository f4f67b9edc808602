# topmark:header:start
#
#   project      : Csonify
#   file         : test_api.py
#   file_relpath : tests/core/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API: `convert`, `convert_lines`, line endings and configuration errors."""

from __future__ import annotations

import datetime
import os
from pathlib import PurePosixPath
from typing import Any

import pytest

import csonify
from csonify import ConfigurationError, LineEnding, SerializationConfig, convert, convert_lines
from csonify.core.assembler import assemble


def test_convert_joins_with_lf_by_default() -> None:
    assert convert({"a": [1, 2, 3]}) == "a: [\n  1\n  2\n  3\n]"


def test_convert_with_crlf() -> None:
    text = convert({"a": 1, "b": 2}, newline=LineEnding.CRLF.value)
    assert text == "a: 1\r\nb: 2"


def test_convert_has_no_trailing_terminator() -> None:
    assert not convert({"a": {"b": 1}}).endswith("\n")


def test_convert_single_line_document() -> None:
    assert convert("x") == '"x"'


def test_convert_lines_matches_convert() -> None:
    value: dict[str, Any] = {"k": [1, {"v": None}]}
    assert "\n".join(convert_lines(value)) == convert(value)


def test_default_config() -> None:
    config = SerializationConfig()
    assert config.indent_unit == "  "
    assert config.max_depth == 2
    assert config.enums_as_strings is False


@pytest.mark.parametrize("depth", [0, -1, 101, 1000])
def test_out_of_range_depth_is_rejected(depth: int) -> None:
    with pytest.raises(ConfigurationError):
        SerializationConfig(max_depth=depth)


@pytest.mark.parametrize("depth", [1, 50, 100])
def test_depth_bounds_are_inclusive(depth: int) -> None:
    assert SerializationConfig(max_depth=depth).max_depth == depth


def test_boolean_depth_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        SerializationConfig(max_depth=True)


def test_empty_indent_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        SerializationConfig(indent_unit="")


def test_configuration_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        SerializationConfig(max_depth=0)


def test_unsupported_newline_is_rejected_before_emitting() -> None:
    class Exploding:
        def __cson_items__(self) -> list[tuple[str, Any]]:
            raise AssertionError("emitter must not run")

    with pytest.raises(ConfigurationError):
        convert(Exploding(), newline="\n\n")


def test_config_is_immutable() -> None:
    config = SerializationConfig()
    with pytest.raises(AttributeError):
        config.max_depth = 5  # type: ignore[misc]


def test_thaw_and_freeze_round_trip() -> None:
    config = SerializationConfig(indent_unit="\t", max_depth=7, enums_as_strings=True)
    assert config.thaw().freeze() == config


def test_assemble() -> None:
    assert assemble([]) == ""
    assert assemble(["a"]) == "a"
    assert assemble(["a", "b"], "\r\n") == "a\r\nb"


def test_line_ending_from_name() -> None:
    assert LineEnding.from_name("lf") is LineEnding.LF
    assert LineEnding.from_name("CRLF") is LineEnding.CRLF
    assert LineEnding.from_name("native") is LineEnding(os.linesep)
    assert LineEnding.from_name("bogus") is None
    assert LineEnding.from_name(None) is None


def test_public_exports() -> None:
    for name in csonify.__all__:
        assert hasattr(csonify, name)


def test_values_without_members_keep_their_text() -> None:
    value = {"p": PurePosixPath("a/b"), "d": datetime.timedelta(seconds=3), "c": 1 + 2j}
    assert convert(value) == 'p: "a/b"\nd: "0:00:03"\nc: "(1+2j)"'
