# topmark:header:start
#
#   project      : MultipartForm
#   file         : reflect.py
#   file_relpath : src/multipartform/model/reflect.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Convert ordinary Python values into `StructuredValue` trees.

This is the only place where Python types are inspected. Supported inputs:

| Python value                      | StructuredValue          |
|-----------------------------------|--------------------------|
| ``None``                          | `Absent`                 |
| ``bool``                          | `Bool`                   |
| ``int`` / ``float`` / ``Decimal`` | `Number`                 |
| ``str``                           | `Scalar`                 |
| ``Enum`` member                   | its ``.value``, converted |
| ``date`` / ``datetime``           | `Scalar` (formatted)     |
| ``Mapping`` with ``str`` keys     | `Nested`                 |
| dataclass instance                | `Nested` (field order)   |
| ``list`` / ``tuple``              | `Array`                  |
| a `StructuredValue`               | unchanged                |

Anything else raises `UnsupportedNestingError`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from multipartform.constants import DEFAULT_DATE_FORMAT
from multipartform.core.errors import UnsupportedNestingError
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
from multipartform.utils.dates import format_form_date

_VARIANTS: tuple[type, ...] = (Scalar, Bool, Number, Absent, Array, Nested)


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def to_structured(obj: Any, *, date_format: str = DEFAULT_DATE_FORMAT) -> StructuredValue:
    """Convert a Python value into a `StructuredValue`.

    Args:
        obj (Any): The value to convert (see the module table for supported types).
        date_format (str): ``strftime`` pattern applied to dates and datetimes.

    Returns:
        StructuredValue: The equivalent structured value.

    Raises:
        UnsupportedNestingError: If ``obj`` (or a value below it) has no
            structured representation.
    """
    return _convert(obj, "", date_format, set())


def _convert(obj: Any, path: str, date_format: str, active: set[int]) -> StructuredValue:
    if isinstance(obj, _VARIANTS):
        return obj
    if obj is None:
        return ABSENT
    # bool before int: bool is an int subclass
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, Enum):
        return _convert(obj.value, path, date_format, active)
    if isinstance(obj, (int, float, Decimal)):
        return Number(obj)
    if isinstance(obj, str):
        return Scalar(obj)
    if isinstance(obj, date):
        return Scalar(format_form_date(obj, date_format))
    is_record = dataclasses.is_dataclass(obj) and not isinstance(obj, type)
    if not (is_record or isinstance(obj, (Mapping, list, tuple))):
        raise UnsupportedNestingError(path, f"unsupported type {type(obj).__name__}")
    # containers currently being converted, by identity
    if id(obj) in active:
        raise UnsupportedNestingError(path, "cyclic reference")
    active.add(id(obj))
    try:
        return _convert_container(obj, path, date_format, active, is_record=is_record)
    finally:
        active.discard(id(obj))


def _convert_container(
    obj: Any, path: str, date_format: str, active: set[int], *, is_record: bool
) -> StructuredValue:
    if is_record:
        return Nested(
            tuple(
                (f.name, _convert(getattr(obj, f.name), _join(path, f.name), date_format, active))
                for f in dataclasses.fields(obj)
            )
        )
    if isinstance(obj, Mapping):
        pairs: list[tuple[str, StructuredValue]] = []
        for key, value in obj.items():
            if not isinstance(key, str):
                raise UnsupportedNestingError(path, f"record keys must be strings, got {key!r}")
            if not key:
                raise UnsupportedNestingError(path, "record keys must not be empty")
            pairs.append((key, _convert(value, _join(path, key), date_format, active)))
        return Nested(tuple(pairs))
    return Array(
        tuple(_convert(item, f"{path}[{i}]", date_format, active) for i, item in enumerate(obj))
    )
