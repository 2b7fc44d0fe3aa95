# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""File type descriptors, signature validators and the built-in catalog.

This package defines [`FileType`][multipartform.filetypes.base.FileType], the
signature validators in [`multipartform.filetypes.signatures`][] and the built-in
descriptors, which are also exposed here by name for convenience
(``filetypes.PNG``, ``filetypes.PDF``, ...).
"""

from __future__ import annotations

from multipartform.filetypes.base import ContentType, ContentValidator, FileType, accept_any
from multipartform.filetypes.builtins.documents import CSV, DOC, DOCX, EXCEL, JSON, PDF, TEXT
from multipartform.filetypes.builtins.images import (
    AVIF,
    BMP,
    GIF,
    HEIC,
    JPEG,
    PNG,
    SVG,
    TIFF,
    WEBP,
    ImageKind,
    image,
)
from multipartform.filetypes.signatures import detect_content_type

__all__ = [
    "AVIF",
    "BMP",
    "CSV",
    "DOC",
    "DOCX",
    "EXCEL",
    "GIF",
    "HEIC",
    "JPEG",
    "JSON",
    "PDF",
    "PNG",
    "SVG",
    "TEXT",
    "TIFF",
    "WEBP",
    "ContentType",
    "ContentValidator",
    "FileType",
    "ImageKind",
    "accept_any",
    "detect_content_type",
    "image",
]
