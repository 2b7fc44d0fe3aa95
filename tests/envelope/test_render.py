# topmark:header:start
#
#   project      : MultipartForm
#   file         : test_render.py
#   file_relpath : tests/envelope/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Tests for multipart body rendering."""

from __future__ import annotations

import pytest

from multipartform.core.errors import MalformedBoundaryError
from multipartform.encoding.fields import Field
from multipartform.envelope.render import BodyPart, render_multipart


def test_text_parts_are_framed_with_crlf() -> None:
    body = render_multipart(
        "XyZ", [BodyPart.text("a", "1"), BodyPart.from_field(Field("b", "zwei"))]
    )
    assert body == (
        b"--XyZ\r\n"
        b'Content-Disposition: form-data; name="a"\r\n'
        b"\r\n"
        b"1\r\n"
        b"--XyZ\r\n"
        b'Content-Disposition: form-data; name="b"\r\n'
        b"\r\n"
        b"zwei\r\n"
        b"--XyZ--\r\n"
    )


def test_text_is_utf8() -> None:
    body = render_multipart("b", [BodyPart.text("city", "Zürich")])
    assert "Zürich".encode() in body


def test_file_part_keeps_binary_content() -> None:
    data = b"\x00\r\n\xff"
    part = BodyPart.file("f", "a.bin", "application/octet-stream", data)
    body = render_multipart("b", [part])
    assert b"Content-Type: application/octet-stream\r\n\r\n" + data + b"\r\n--b--\r\n" in body


def test_no_parts_yields_closing_delimiter() -> None:
    assert render_multipart("b", []) == b"--b--\r\n"


def test_malformed_boundary() -> None:
    with pytest.raises(MalformedBoundaryError) as excinfo:
        render_multipart("bad boundary", [])
    assert excinfo.value.boundary == "bad boundary"
