# topmark:header:start
#
#   project      : MultipartForm
#   file         : code.py
#   file_relpath : src/multipartform/filetypes/builtins/code.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Source code formats (metadata only).

Exports:
    FILETYPES: JavaScript and Swift source descriptors.
"""

from __future__ import annotations

from multipartform.filetypes.base import ContentType, FileType

FILETYPES: list[FileType] = [
    FileType(
        name="javascript",
        content_type=ContentType("application", "javascript"),
        extension="js",
        description="JavaScript source",
    ),
    FileType(
        name="swift",
        content_type=ContentType("text", "x-swift"),
        extension="swift",
        description="Swift source",
    ),
]
