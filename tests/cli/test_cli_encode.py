# topmark:header:start
#
#   project      : MultipartForm
#   file         : test_cli_encode.py
#   file_relpath : tests/cli/test_cli_encode.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Output of `multipartform encode`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_DATA_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli_in,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

RECORD = {"name": "Jane", "tags": ["a", "b"], "address": {"city": "Zürich"}, "nick": None}


@mark_cli
def test_encode_stdin_lines(isolation: Path) -> None:
    result = run_cli_in(isolation, ["encode"], input_text=json.dumps(RECORD))
    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "name=Jane",
        "tags=a",
        "tags=b",
        'address={"city":"Zürich"}',
    ]


@mark_cli
def test_encode_file_with_brackets(isolation: Path) -> None:
    (isolation / "in.json").write_text(json.dumps({"tags": ["x"]}), encoding="utf-8")
    result = run_cli_in(isolation, ["encode", "in.json", "--strategy", "BRACKETS"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["tags[]=x"]


@mark_cli
def test_encode_strategy_from_config(isolation: Path) -> None:
    (isolation / "multipartform.toml").write_text(
        "[encoding]\narray_strategy = 'brackets'\n", encoding="utf-8"
    )
    result = run_cli_in(isolation, ["encode"], input_text='{"t": [1]}')
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["t[]=1"]


@mark_cli
def test_encode_keeps_decimal_text(isolation: Path) -> None:
    result = run_cli_in(isolation, ["encode"], input_text='{"price": 19.90}')
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["price=19.90"]


@mark_cli
def test_encode_render(isolation: Path) -> None:
    result = run_cli_in(isolation, ["encode", "--render"], input_text='{"a": "1"}')
    assert_SUCCESS(result)
    head, _, body = result.output.partition("\n\n")
    assert head.startswith("Content-Type: multipart/form-data; boundary=")
    boundary = head.split("boundary=", 1)[1]
    assert f"--{boundary}" in body
    assert 'Content-Disposition: form-data; name="a"' in body
    assert body.rstrip().endswith(f"--{boundary}--")


@mark_cli
def test_encode_invalid_json(isolation: Path) -> None:
    result = run_cli_in(isolation, ["encode"], input_text="{not json")
    assert_DATA_ERROR(result)
    assert "Invalid JSON input" in result.output


@mark_cli
def test_encode_non_object(isolation: Path) -> None:
    result = run_cli_in(isolation, ["encode"], input_text="[1, 2]")
    assert_USAGE_ERROR(result)
    assert "Expected a JSON object" in result.output


@mark_cli
def test_encode_nested_array_is_data_error(isolation: Path) -> None:
    result = run_cli_in(isolation, ["encode"], input_text='{"grid": [[1]]}')
    assert_DATA_ERROR(result)
    assert "grid[0]" in result.output


@mark_cli
def test_encode_empty_field_name_in_config(isolation: Path) -> None:
    (isolation / "multipartform.toml").write_text(
        "[upload]\nfield_name = ''\n", encoding="utf-8"
    )
    result = run_cli_in(isolation, ["encode"], input_text="{}")
    assert_CONFIG_ERROR(result)
