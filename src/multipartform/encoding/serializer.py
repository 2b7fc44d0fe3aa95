# topmark:header:start
#
#   project      : MultipartForm
#   file         : serializer.py
#   file_relpath : src/multipartform/encoding/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""JSON text serializer used as the fallback for nested values.

Values the field encoder cannot flatten into a single field (records below the
root, records inside arrays) are rendered as compact JSON text. `Absent` members
are omitted, matching how optional properties are left out of JSON documents.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from multipartform.core.errors import SerializationFailureError
from multipartform.model.values import (
    Absent,
    Array,
    Bool,
    Nested,
    Number,
    Scalar,
    StructuredValue,
)


def to_plain(value: StructuredValue) -> Any:
    """Return the JSON-compatible Python equivalent of ``value``.

    `Absent` maps to ``None`` at the top level and is dropped inside records
    and arrays.
    """
    match value:
        case Scalar(text=text):
            return text
        case Bool(value=flag):
            return flag
        case Number(value=number):
            return _plain_decimal(number) if isinstance(number, Decimal) else number
        case Absent():
            return None
        case Array(items=items):
            return [to_plain(item) for item in items if not isinstance(item, Absent)]
        case Nested(fields=fields):
            return {
                name: to_plain(item) for name, item in fields if not isinstance(item, Absent)
            }
    raise TypeError(f"Not a StructuredValue: {value!r}")


def _plain_decimal(number: Decimal) -> int | float:
    """Return the JSON number for ``number`` without changing its value.

    Integral decimals become ``int``. Fractions become ``float`` only when the
    float prints back to the same decimal; anything else raises ``ValueError``.
    """
    if not number.is_finite():
        raise ValueError(f"Out of range decimal value is not JSON compliant: {number}")
    if number == number.to_integral_value():
        return int(number)
    approx = float(number)
    if Decimal(repr(approx)) != number:
        raise ValueError(f"Decimal {number} has no exact JSON number representation")
    return approx


def serialize(value: StructuredValue, *, path: str = "") -> str:
    """Serialize a structured value as compact JSON text.

    Args:
        value (StructuredValue): The value to serialize.
        path (str): Location of ``value`` in the root record, used in error messages.

    Returns:
        str: Compact JSON text (no insignificant whitespace, non-ASCII kept).

    Raises:
        SerializationFailureError: If the value cannot be represented as JSON
            (e.g. a non-finite number).
    """
    try:
        return json.dumps(
            to_plain(value),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as exc:
        raise SerializationFailureError(path, str(exc)) from exc
