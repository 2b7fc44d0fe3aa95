# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/encoding/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Field encoding: flatten structured values into ordered ``(name, value)`` pairs."""

from __future__ import annotations

from multipartform.encoding.fields import ArrayEncodingStrategy, Field, FieldEncoder, encode_fields

__all__ = [
    "ArrayEncodingStrategy",
    "Field",
    "FieldEncoder",
    "encode_fields",
]
