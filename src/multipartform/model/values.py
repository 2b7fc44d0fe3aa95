# topmark:header:start
#
#   project      : MultipartForm
#   file         : values.py
#   file_relpath : src/multipartform/model/values.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Structured-value model: the closed tagged variant flattened into form fields.

A `StructuredValue` is one of:

* `Scalar`: a text value, emitted unchanged.
* `Bool`: emitted as ``"true"`` / ``"false"``.
* `Number`: an ``int``, ``float`` or ``Decimal``, emitted as canonical decimal text.
* `Absent`: an optional value that is not present; never emits output.
* `Array`: an ordered sequence of values (repeated field).
* `Nested`: an ordered record of named values.

All variants are frozen dataclasses, so structurally-equal values compare and hash
equal. Values are normally built once through
[`to_structured`][multipartform.model.reflect.to_structured]; the encoder only
pattern-matches these classes and never inspects arbitrary Python objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Final, Union

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class Scalar:
    """A text value."""

    text: str


@dataclass(frozen=True, slots=True)
class Bool:
    """A boolean value."""

    value: bool


@dataclass(frozen=True, slots=True)
class Number:
    """A numeric value (``bool`` is not a number here; use `Bool`)."""

    value: int | float | Decimal

    def to_text(self) -> str:
        """Return the canonical decimal text of the number.

        Integers render with ``str()``, floats with their shortest round-trip
        ``repr()`` and decimals in positional notation. No locale-specific
        grouping is ever applied.
        """
        value = self.value
        if isinstance(value, Decimal):
            return format(value, "f")
        if isinstance(value, float):
            return repr(value)
        return str(value)


@dataclass(frozen=True, slots=True)
class Absent:
    """An optional value that is not present."""


ABSENT: Final[Absent] = Absent()


@dataclass(frozen=True, slots=True)
class Array:
    """An ordered sequence of values, emitted as a repeated field."""

    items: tuple[StructuredValue, ...] = ()

    def __iter__(self) -> Iterator[StructuredValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class Nested:
    """An ordered record of named values.

    Attributes:
        fields (tuple[tuple[str, StructuredValue], ...]): ``(name, value)`` pairs in
            declaration order. Names must be unique.
    """

    fields: tuple[tuple[str, StructuredValue], ...] = field(default=())

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for name, _value in self.fields:
            if not name:
                raise ValueError("Record field names must not be empty")
            if name in seen:
                raise ValueError(f"Duplicate field name in record: {name!r}")
            seen.add(name)

    @classmethod
    def of(
        cls,
        pairs: Iterable[tuple[str, StructuredValue]] = (),
        /,
        **kwargs: StructuredValue,
    ) -> Nested:
        """Build a record from ``(name, value)`` pairs and/or keyword arguments.

        Keyword arguments follow the positional pairs, in call order.
        """
        return cls(tuple(pairs) + tuple(kwargs.items()))

    def names(self) -> tuple[str, ...]:
        """Return the field names in declaration order."""
        return tuple(name for name, _value in self.fields)

    def get(self, name: str) -> StructuredValue | None:
        """Return the value for ``name`` or None if the record has no such field."""
        for key, value in self.fields:
            if key == name:
                return value
        return None


StructuredValue = Union[Scalar, Bool, Number, Absent, Array, Nested]
"""Closed union of all structured-value variants."""

SCALAR_TYPES: Final[tuple[type, ...]] = (Scalar, Bool, Number)
