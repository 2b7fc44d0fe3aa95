# topmark:header:start
#
#   project      : MultipartForm
#   file         : test_dates.py
#   file_relpath : tests/utils/test_dates.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Tests for form date helpers."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from multipartform.utils.dates import format_form_date, parse_form_date


def test_default_pattern() -> None:
    assert format_form_date(date(2024, 2, 29)) == "2024-02-29"
    assert parse_form_date("2024-02-29") == date(2024, 2, 29)


def test_datetime_is_formatted_as_date() -> None:
    assert format_form_date(datetime(2024, 1, 2, 13, 45)) == "2024-01-02"


def test_custom_pattern() -> None:
    assert format_form_date(date(2024, 1, 2), "%d/%m/%Y") == "02/01/2024"
    assert parse_form_date("02/01/2024", "%d/%m/%Y") == date(2024, 1, 2)


def test_parse_rejects_mismatch() -> None:
    with pytest.raises(ValueError):
        parse_form_date("2024/01/02")
