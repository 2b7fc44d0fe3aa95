# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/envelope/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Wire-level helpers: boundary tokens, Content-Disposition values and rendering."""

from __future__ import annotations

from multipartform.envelope.boundary import generate_boundary, is_valid_boundary
from multipartform.envelope.disposition import format_content_disposition
from multipartform.envelope.render import BodyPart, render_multipart

__all__ = [
    "BodyPart",
    "format_content_disposition",
    "generate_boundary",
    "is_valid_boundary",
    "render_multipart",
]
