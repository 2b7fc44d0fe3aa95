# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Public registry for MultipartForm file types.

Exposes [`FileTypeRegistry`][multipartform.registry.filetypes.FileTypeRegistry],
a read-oriented view over the built-in and plugin catalog with process-local
overlay registration.
"""

from __future__ import annotations

from multipartform.registry.filetypes import FileTypeMeta, FileTypeRegistry

__all__ = [
    "FileTypeMeta",
    "FileTypeRegistry",
]
