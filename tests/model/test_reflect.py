# topmark:header:start
#
#   project      : MultipartForm
#   file         : test_reflect.py
#   file_relpath : tests/model/test_reflect.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Tests for converting plain Python values into structured values."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

import pytest

from multipartform.core.errors import UnsupportedNestingError
from multipartform.model.reflect import to_structured
from multipartform.model.values import ABSENT, Array, Bool, Nested, Number, Scalar


class _Color(Enum):
    RED = "red"
    ONE = 1


@dataclass
class _Inner:
    x: int


@dataclass
class _Outer:
    title: str
    inner: _Inner
    when: date
    maybe: str | None = None


@dataclass
class _Node:
    name: str
    children: list[_Node] = field(default_factory=lambda: [])


def test_scalars() -> None:
    """Each scalar Python type maps to its variant; bool is not a Number."""
    assert to_structured("a") == Scalar("a")
    assert to_structured(True) == Bool(True)
    assert to_structured(3) == Number(3)
    assert to_structured(1.5) == Number(1.5)
    assert to_structured(Decimal("0.10")) == Number(Decimal("0.10"))
    assert to_structured(None) is ABSENT


def test_enum_uses_value() -> None:
    """Enum members convert through their value."""
    assert to_structured(_Color.RED) == Scalar("red")
    assert to_structured(_Color.ONE) == Number(1)


def test_dates_use_pattern() -> None:
    """Dates and datetimes render with the given pattern."""
    assert to_structured(date(2024, 2, 29)) == Scalar("2024-02-29")
    assert to_structured(datetime(2024, 2, 29, 13, 5), date_format="%d/%m/%Y %H:%M") == Scalar(
        "29/02/2024 13:05"
    )


def test_dataclass_preserves_field_order() -> None:
    """Dataclass instances become records in field declaration order."""
    value = to_structured(_Outer("t", _Inner(1), date(2020, 1, 2)))
    assert isinstance(value, Nested)
    assert value.names() == ("title", "inner", "when", "maybe")
    assert value.get("inner") == Nested.of(x=Number(1))
    assert value.get("maybe") is ABSENT


def test_mapping_and_sequences() -> None:
    """Mappings become records in insertion order; lists and tuples become arrays."""
    value = to_structured({"b": [1, "x"], "a": (True,)})
    assert value == Nested.of(
        b=Array((Number(1), Scalar("x"))),
        a=Array((Bool(True),)),
    )


def test_existing_variants_pass_through() -> None:
    """Structured values are returned unchanged."""
    nested = Nested.of(a=Scalar("x"))
    assert to_structured(nested) is nested


def test_non_string_keys_are_rejected() -> None:
    """Record keys must be strings."""
    with pytest.raises(UnsupportedNestingError):
        to_structured({"ok": {1: "x"}})


def test_unsupported_type_reports_path() -> None:
    """Unsupported values report their location in the record."""
    with pytest.raises(UnsupportedNestingError) as excinfo:
        to_structured({"a": {"b": [1, object()]}})
    assert excinfo.value.path == "a.b[1]"


def test_empty_keys_are_rejected() -> None:
    """An empty key cannot become a form field name."""
    with pytest.raises(UnsupportedNestingError) as excinfo:
        to_structured({"a": {"": 1}})
    assert excinfo.value.path == "a"


def test_self_referencing_mapping_is_rejected() -> None:
    """A mapping that contains itself is reported instead of recursing forever."""
    record: dict[str, object] = {"name": "loop"}
    record["self"] = record
    with pytest.raises(UnsupportedNestingError) as excinfo:
        to_structured(record)
    assert excinfo.value.path == "self"
    assert excinfo.value.reason == "cyclic reference"


def test_self_referencing_list_is_rejected() -> None:
    items: list[object] = [1]
    items.append(items)
    with pytest.raises(UnsupportedNestingError) as excinfo:
        to_structured({"items": items})
    assert excinfo.value.path == "items[1]"


def test_self_referencing_dataclass_is_rejected() -> None:
    root = _Node("root")
    root.children.append(_Node("leaf", [root]))
    with pytest.raises(UnsupportedNestingError, match="cyclic reference"):
        to_structured(root)


def test_shared_values_are_not_cycles() -> None:
    """The same container may appear twice as long as it does not contain itself."""
    shared = {"x": 1}
    value = to_structured({"a": shared, "b": [shared, shared]})
    assert isinstance(value, Nested)
    assert value.names() == ("a", "b")
