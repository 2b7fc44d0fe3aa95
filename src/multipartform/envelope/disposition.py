# topmark:header:start
#
#   project      : MultipartForm
#   file         : disposition.py
#   file_relpath : src/multipartform/envelope/disposition.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Content-Disposition header values for ``multipart/form-data`` parts.

Field names and filenames are written as quoted strings. Following RFC 7578 and
current browser behaviour, ``"``, CR and LF are percent-encoded inside the
quotes. A filename containing non-ASCII characters additionally gets an
RFC 2231 ``filename*`` parameter carrying the exact UTF-8 name.
"""

from __future__ import annotations

from typing import Final
from urllib.parse import quote

_ESCAPES: Final[dict[int, str]] = {
    ord('"'): "%22",
    ord("\r"): "%0D",
    ord("\n"): "%0A",
}


def quote_parameter(value: str) -> str:
    """Return ``value`` as a quoted header parameter with form-data escaping."""
    return '"' + value.translate(_ESCAPES) + '"'


def format_content_disposition(name: str, filename: str | None = None) -> str:
    """Return the Content-Disposition value for a form-data body part.

    Args:
        name (str): The form field name.
        filename (str | None): The filename, for file parts.

    Returns:
        str: e.g. ``form-data; name="avatar"; filename="me.png"``.
    """
    value = f"form-data; name={quote_parameter(name)}"
    if filename is None:
        return value
    value += f"; filename={quote_parameter(filename)}"
    if not filename.isascii():
        value += f"; filename*=utf-8''{quote(filename, safe='')}"
    return value
