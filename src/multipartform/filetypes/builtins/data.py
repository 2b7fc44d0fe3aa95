# topmark:header:start
#
#   project      : MultipartForm
#   file         : data.py
#   file_relpath : src/multipartform/filetypes/builtins/data.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Archive and database formats (metadata only)."""

from __future__ import annotations

from multipartform.filetypes.base import ContentType, FileType

FILETYPES: list[FileType] = [
    FileType(
        name="zip",
        content_type=ContentType("application", "zip"),
        extension="zip",
        description="ZIP archive",
    ),
    FileType(
        name="sqlite",
        content_type=ContentType("application", "x-sqlite3"),
        extension="sqlite",
        description="SQLite 3 database",
    ),
]
