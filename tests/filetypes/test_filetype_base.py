# topmark:header:start
#
#   project      : MultipartForm
#   file         : test_filetype_base.py
#   file_relpath : tests/filetypes/test_filetype_base.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Tests for file type descriptors and content types."""

from __future__ import annotations

import pytest

from multipartform import filetypes
from multipartform.core.errors import ContentMismatchError
from multipartform.filetypes.base import ContentType, ContentValidator, FileType, accept_any
from multipartform.filetypes.builtins.images import ImageKind, image


def _looks_like_xml(data: bytes) -> None:
    if not data.startswith(b"<?xml"):
        raise ContentMismatchError(expected="application/xml")


def test_custom_file_type() -> None:
    """Callers can define new formats without touching the catalog."""
    xml = FileType(
        name="xml",
        content_type=ContentType("application", "xml"),
        extension="xml",
        validate=_looks_like_xml,
        signature=True,
    )
    xml.validate(b"<?xml version='1.0'?><a/>")
    with pytest.raises(ContentMismatchError):
        xml.validate(b"{}")
    assert xml.mime == "application/xml"
    assert xml.matches_extension("Feed.XML")
    assert not xml.matches_extension("feed.xmlx")


def test_validators_satisfy_protocol() -> None:
    """Plain functions and built-in validators are ContentValidators."""
    assert isinstance(accept_any, ContentValidator)
    assert isinstance(filetypes.PNG.validate, ContentValidator)


def test_descriptor_rules() -> None:
    """A name is required and extensions carry no leading dot."""
    with pytest.raises(ValueError):
        FileType(name="", content_type=ContentType("a", "b"), extension="b")
    with pytest.raises(ValueError):
        FileType(name="b", content_type=ContentType("a", "b"), extension=".b")


def test_content_type_parse_and_render() -> None:
    """Content types parse case-insensitively and render with parameters."""
    ct = ContentType.parse('Text/CSV; charset="utf-8"')
    assert ct == ContentType("text", "csv", (("charset", "utf-8"),))
    assert str(ct) == "text/csv; charset=utf-8"
    assert ct.essence == "text/csv"
    with pytest.raises(ValueError):
        ContentType.parse("nonsense")


def test_builtin_content_types() -> None:
    """Built-in descriptors carry the standard MIME types and extensions."""
    assert filetypes.JPEG.mime == "image/jpeg"
    assert filetypes.JPEG.extension == "jpg"
    assert filetypes.SVG.mime == "image/svg+xml"
    assert filetypes.EXCEL.extension == "xlsx"
    assert filetypes.DOCX.mime.startswith("application/vnd.openxmlformats")


def test_image_kind_lookup() -> None:
    """Every image kind maps to the descriptor of the same name."""
    for kind in ImageKind:
        assert image(kind).name == kind.value
