# topmark:header:start
#
#   project      : MultipartForm
#   file         : dates.py
#   file_relpath : src/multipartform/utils/dates.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Stateless date helpers for form values.

Dates in form fields are rendered with an explicit ``strftime`` pattern,
``%Y-%m-%d`` by default. There is no shared formatter instance.
"""

from __future__ import annotations

from datetime import date, datetime

from multipartform.constants import DEFAULT_DATE_FORMAT


def format_form_date(value: date, pattern: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a date (or datetime) for use as a form field value.

    Args:
        value (date): The date or datetime to format.
        pattern (str): ``strftime`` pattern.

    Returns:
        str: The formatted date.
    """
    return value.strftime(pattern)


def parse_form_date(text: str, pattern: str = DEFAULT_DATE_FORMAT) -> date:
    """Parse a form field value into a date.

    Args:
        text (str): The text to parse.
        pattern (str): ``strptime`` pattern.

    Returns:
        date: The parsed calendar date.

    Raises:
        ValueError: If ``text`` does not match ``pattern``.
    """
    return datetime.strptime(text, pattern).date()
