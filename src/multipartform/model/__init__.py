# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Structured value model and reflection from plain Python values."""

from __future__ import annotations

from multipartform.model.reflect import to_structured
from multipartform.model.values import (
    ABSENT,
    Absent,
    Array,
    Bool,
    Nested,
    Number,
    Scalar,
    StructuredValue,
)

__all__ = [
    "ABSENT",
    "Absent",
    "Array",
    "Bool",
    "Nested",
    "Number",
    "Scalar",
    "StructuredValue",
    "to_structured",
]
