# topmark:header:start
#
#   project      : MultipartForm
#   file         : test_values.py
#   file_relpath : tests/model/test_values.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Tests for the structured value variants."""

from __future__ import annotations

from decimal import Decimal

import pytest

from multipartform.model.values import ABSENT, Absent, Array, Nested, Number, Scalar
from tests.conftest import parametrize


@parametrize(
    ("number", "text"),
    [
        (0, "0"),
        (-12, "-12"),
        (10**20, "100000000000000000000"),
        (0.1, "0.1"),
        (1e16, "1e+16"),
        (Decimal("1E+3"), "1000"),
        (Decimal("0.000001"), "0.000001"),
    ],
)
def test_number_text(number: int | float | Decimal, text: str) -> None:
    """Numbers render canonically without locale grouping."""
    assert Number(number).to_text() == text


def test_nested_rejects_duplicate_names() -> None:
    """Record field names are unique."""
    with pytest.raises(ValueError, match="Duplicate"):
        Nested((("a", Scalar("1")), ("a", Scalar("2"))))


def test_nested_of_keeps_call_order() -> None:
    """Positional pairs come first, keyword arguments after, in call order."""
    value = Nested.of([("z", Scalar("1"))], b=Scalar("2"), a=Scalar("3"))
    assert value.names() == ("z", "b", "a")
    assert value.get("missing") is None


def test_structural_equality() -> None:
    """Variants compare by value; Absent instances are all equal."""
    assert Array((Scalar("a"),)) == Array((Scalar("a"),))
    assert Absent() == ABSENT
    assert len(Array((ABSENT, ABSENT))) == 2


def test_nested_rejects_empty_names() -> None:
    """Every record member needs a name."""
    with pytest.raises(ValueError, match="empty"):
        Nested((("", Scalar("1")),))
