# topmark:header:start
#
#   project      : MultipartForm
#   file         : boundary.py
#   file_relpath : src/multipartform/envelope/boundary.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Multipart boundary tokens (RFC 2046 section 5.1.1)."""

from __future__ import annotations

import re
import secrets
from typing import Final

BOUNDARY_PREFIX: Final[str] = "----MultipartFormBoundary"
MAX_BOUNDARY_LENGTH: Final[int] = 70

# RFC 2046 bchars, excluding space so tokens never need quoting
_BOUNDARY_RE: Final[re.Pattern[str]] = re.compile(r"[0-9A-Za-z'()+_,\-./:=?]{1,70}")


def generate_boundary() -> str:
    """Return a new unpredictable boundary token.

    The token is ASCII, contains no whitespace and is at most 70 characters.
    """
    return BOUNDARY_PREFIX + secrets.token_hex(16)


def is_valid_boundary(boundary: str) -> bool:
    """Return True if ``boundary`` is usable as a multipart delimiter."""
    return _BOUNDARY_RE.fullmatch(boundary) is not None
