# topmark:header:start
#
#   project      : MultipartForm
#   file         : test_field_encoder.py
#   file_relpath : tests/encoding/test_field_encoder.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Tests for flattening structured values into ordered form fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

import pytest

from multipartform.core.errors import SerializationFailureError, UnsupportedNestingError
from multipartform.encoding.fields import (
    ArrayEncodingStrategy,
    Field,
    FieldEncoder,
    encode_fields,
)
from multipartform.model.values import (
    ABSENT,
    Array,
    Bool,
    Nested,
    Number,
    Scalar,
)
from tests.conftest import parametrize


@dataclass
class _Profile:
    name: str
    tags: list[str] = field(default_factory=lambda: [])
    nickname: str | None = None


def _pairs(fields: list[Field]) -> list[tuple[str, str]]:
    return [(f.name, f.value) for f in fields]


@parametrize("strategy", list(ArrayEncodingStrategy))
def test_empty_array_emits_nothing(strategy: ArrayEncodingStrategy) -> None:
    """A record with an empty array only emits its scalar members under every strategy."""
    encoder = FieldEncoder(strategy)
    assert _pairs(encoder.encode_object(_Profile(name="Jane"))) == [("name", "Jane")]


def test_accumulate_values_repeats_declared_name() -> None:
    """ACCUMULATE_VALUES emits one field per element under the declared name."""
    fields = FieldEncoder(ArrayEncodingStrategy.ACCUMULATE_VALUES).encode_object(
        _Profile(name="Jane", tags=["a", "b"])
    )
    assert _pairs(fields) == [("name", "Jane"), ("tags", "a"), ("tags", "b")]


def test_brackets_appends_suffix() -> None:
    """BRACKETS emits one field per element named ``tags[]``."""
    fields = FieldEncoder(ArrayEncodingStrategy.BRACKETS).encode_object(
        _Profile(name="Jane", tags=["a", "b"])
    )
    assert _pairs(fields) == [("name", "Jane"), ("tags[]", "a"), ("tags[]", "b")]


def test_absent_optional_emits_no_field() -> None:
    """An absent optional contributes nothing; a present one emits its value."""
    encoder = FieldEncoder()
    assert ("nickname", "JJ") in _pairs(encoder.encode_object(_Profile("Jane", nickname="JJ")))
    assert "nickname" not in [f.name for f in encoder.encode_object(_Profile("Jane"))]


def test_scalar_rendering() -> None:
    """Booleans, numbers and text render canonically in declaration order."""
    value = Nested.of(
        flag=Bool(True),
        off=Bool(False),
        count=Number(42),
        ratio=Number(0.5),
        price=Number(Decimal("19.90")),
        label=Scalar("héllo wörld"),
    )
    assert _pairs(encode_fields(value)) == [
        ("flag", "true"),
        ("off", "false"),
        ("count", "42"),
        ("ratio", "0.5"),
        ("price", "19.90"),
        ("label", "héllo wörld"),
    ]


def test_absent_array_elements_are_skipped() -> None:
    """Absent elements inside an array emit nothing; an all-absent array emits nothing."""
    value = Nested.of(
        a=Array((Scalar("x"), ABSENT, Scalar("y"))),
        b=Array((ABSENT, ABSENT)),
    )
    assert _pairs(encode_fields(value)) == [("a", "x"), ("a", "y")]


def test_array_of_arrays_is_rejected() -> None:
    """Arrays directly inside arrays raise UnsupportedNestingError with the element path."""
    value = Nested.of(grid=Array((Array((Number(1),)),)))
    with pytest.raises(UnsupportedNestingError) as excinfo:
        encode_fields(value)
    assert excinfo.value.path == "grid[0]"


def test_nested_record_is_serialized_as_json() -> None:
    """A record below the root is emitted as one compact JSON field."""
    value = Nested.of(
        name=Scalar("Jane"),
        address=Nested.of(city=Scalar("Zürich"), zip=Number(8000), unit=ABSENT),
    )
    assert _pairs(encode_fields(value)) == [
        ("name", "Jane"),
        ("address", '{"city":"Zürich","zip":8000}'),
    ]


def test_records_inside_arrays_are_serialized_per_element() -> None:
    """Each record inside an array becomes one JSON field under the array name."""
    value = Nested.of(items=Array((Nested.of(id=Number(1)), Nested.of(id=Number(2)))))
    assert _pairs(encode_fields(value, ArrayEncodingStrategy.BRACKETS)) == [
        ("items[]", '{"id":1}'),
        ("items[]", '{"id":2}'),
    ]


def test_non_finite_nested_number_fails_serialization() -> None:
    """A NaN inside a nested record cannot be serialized as JSON."""
    value = Nested.of(stats=Nested.of(mean=Number(float("nan"))))
    with pytest.raises(SerializationFailureError) as excinfo:
        encode_fields(value)
    assert excinfo.value.path == "stats"


def test_root_scalar_emits_single_unnamed_field() -> None:
    """A bare root scalar yields one field with an empty name."""
    assert _pairs(encode_fields(Scalar("x"))) == [("", "x")]


def test_root_absent_emits_nothing() -> None:
    """A root Absent yields no fields."""
    assert encode_fields(ABSENT) == []


def test_root_array_is_rejected() -> None:
    """A root array has no name to repeat."""
    with pytest.raises(UnsupportedNestingError):
        encode_fields(Array((Scalar("a"),)))


def test_encoding_is_deterministic() -> None:
    """Encoding the same value twice yields identical sequences."""
    encoder = FieldEncoder(ArrayEncodingStrategy.BRACKETS)
    obj = {"b": 1, "a": [True, None, 2.5], "c": {"z": 1, "y": [1, 2]}}
    assert encoder.encode_object(obj) == encoder.encode_object(obj)


@parametrize(
    ("token", "expected"),
    [
        ("accumulate", ArrayEncodingStrategy.ACCUMULATE_VALUES),
        ("ACCUMULATE_VALUES", ArrayEncodingStrategy.ACCUMULATE_VALUES),
        ("accumulate-values", ArrayEncodingStrategy.ACCUMULATE_VALUES),
        (" Brackets ", ArrayEncodingStrategy.BRACKETS),
        ("nope", None),
        (None, None),
    ],
)
def test_strategy_parse(token: str | None, expected: ArrayEncodingStrategy | None) -> None:
    """Strategy tokens parse from values or member names, case-insensitively."""
    assert ArrayEncodingStrategy.parse(token) is expected


def test_nested_decimal_keeps_exact_value() -> None:
    """Large integral decimals inside nested records are not rounded through float."""
    value = Nested.of(order=Nested.of(id=Number(Decimal("12345678901234567890"))))
    assert _pairs(encode_fields(value)) == [("order", '{"id":12345678901234567890}')]


def test_empty_member_name_is_rejected() -> None:
    """A mapping key of ``""`` has no form field name."""
    with pytest.raises(UnsupportedNestingError) as excinfo:
        FieldEncoder().encode_object({"": "x", "name": "Jane"})
    assert "empty" in str(excinfo.value)
