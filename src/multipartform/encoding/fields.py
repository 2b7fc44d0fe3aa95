# topmark:header:start
#
#   project      : MultipartForm
#   file         : fields.py
#   file_relpath : src/multipartform/encoding/fields.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Flatten a `StructuredValue` into an ordered list of form fields.

The encoder walks the root record in declaration order and emits one
[`Field`][multipartform.encoding.fields.Field] per scalar value:

* `Absent` emits nothing.
* `Bool` emits ``"true"`` / ``"false"``; `Number` emits canonical decimal text;
  `Scalar` emits its text unchanged.
* `Array` emits one field per element, all sharing the declared name. With
  [`ArrayEncodingStrategy.BRACKETS`][multipartform.encoding.fields.ArrayEncodingStrategy]
  the name gets a ``"[]"`` suffix. Empty arrays emit nothing.
* `Nested` values below the root (and records inside arrays) are not flattened
  into dotted paths; they are serialized as JSON and emitted as one field.

Arrays directly inside arrays cannot be represented and raise
`UnsupportedNestingError`.

Root handling:
    A root `Nested` is flattened as described above. A root `Absent` emits
    nothing. A bare root scalar emits a single field with an empty name; callers
    rendering an envelope should wrap scalars in a record instead. A root `Array`
    has no field name to repeat and raises `UnsupportedNestingError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from multipartform.config.logging import get_logger
from multipartform.core.errors import UnsupportedNestingError
from multipartform.encoding.serializer import serialize
from multipartform.model.reflect import to_structured
from multipartform.model.values import (
    Absent,
    Array,
    Bool,
    Nested,
    Number,
    Scalar,
    StructuredValue,
)

if TYPE_CHECKING:
    from multipartform.config.logging import MultipartFormLogger

logger: MultipartFormLogger = get_logger(__name__)

BRACKET_SUFFIX = "[]"


class ArrayEncodingStrategy(Enum):
    """How repeated (array) fields are named.

    Attributes:
        ACCUMULATE_VALUES: Every element uses the declared name (``tags=a``,
            ``tags=b``).
        BRACKETS: Every element uses the declared name plus ``"[]"``
            (``tags[]=a``, ``tags[]=b``), as expected by PHP and Rails backends.
    """

    ACCUMULATE_VALUES = "accumulate"
    BRACKETS = "brackets"

    @classmethod
    def parse(cls, token: str | None) -> ArrayEncodingStrategy | None:
        """Return the member for a config/CLI token (value or member name), or None."""
        if token is None:
            return None
        norm = token.strip().lower().replace("-", "_")
        for member in cls:
            if norm in (member.value, member.name.lower()):
                return member
        return None

    def field_name(self, declared: str) -> str:
        """Return the emitted name for elements of an array declared as ``declared``."""
        if self is ArrayEncodingStrategy.BRACKETS:
            return declared + BRACKET_SUFFIX
        return declared


@dataclass(frozen=True, slots=True)
class Field:
    """A ``(name, value)`` text pair destined for one body part."""

    name: str
    value: str


class FieldEncoder:
    """Encode structured values into ordered form fields.

    The encoder holds no state beyond its array strategy; one instance can be
    shared freely.

    Args:
        array_strategy (ArrayEncodingStrategy): Naming policy for array elements.
    """

    def __init__(
        self,
        array_strategy: ArrayEncodingStrategy = ArrayEncodingStrategy.ACCUMULATE_VALUES,
    ) -> None:
        self.array_strategy: ArrayEncodingStrategy = array_strategy

    def __repr__(self) -> str:
        return f"{type(self).__name__}(array_strategy={self.array_strategy})"

    def encode(self, value: StructuredValue) -> list[Field]:
        """Flatten ``value`` into an ordered list of fields.

        Args:
            value (StructuredValue): The value to encode; normally a `Nested` record.

        Returns:
            list[Field]: The fields in declaration order.

        Raises:
            UnsupportedNestingError: If a container shape cannot be represented.
            SerializationFailureError: If a nested value cannot be serialized.
        """
        fields: list[Field] = []
        match value:
            case Nested(fields=members):
                for name, member in members:
                    self._encode_member(name, member, fields)
            case Absent():
                pass
            case Array():
                raise UnsupportedNestingError("", "an array has no field name at the root")
            case _:
                fields.append(Field("", self._scalar_text(value, "")))
        logger.trace("Encoded %d field(s) with %s", len(fields), self.array_strategy)
        return fields

    def encode_object(self, obj: Any) -> list[Field]:
        """Convert a Python value with `to_structured` and encode it."""
        return self.encode(to_structured(obj))

    def _encode_member(self, name: str, value: StructuredValue, out: list[Field]) -> None:
        match value:
            case Absent():
                return
            case Array(items=items):
                field_name = self.array_strategy.field_name(name)
                for index, item in enumerate(items):
                    path = f"{name}[{index}]"
                    match item:
                        case Absent():
                            continue
                        case Array():
                            raise UnsupportedNestingError(path, "arrays of arrays")
                        case _:
                            out.append(Field(field_name, self._scalar_text(item, path)))
            case _:
                out.append(Field(name, self._scalar_text(value, name)))

    @staticmethod
    def _scalar_text(value: StructuredValue, path: str) -> str:
        match value:
            case Scalar(text=text):
                return text
            case Bool(value=flag):
                return "true" if flag else "false"
            case Number():
                return value.to_text()
            case Nested():
                return serialize(value, path=path)
        raise UnsupportedNestingError(path, f"{type(value).__name__} is not a field value")


def encode_fields(
    value: StructuredValue,
    strategy: ArrayEncodingStrategy = ArrayEncodingStrategy.ACCUMULATE_VALUES,
) -> list[Field]:
    """Flatten ``value`` into fields with a throwaway `FieldEncoder`."""
    return FieldEncoder(strategy).encode(value)
