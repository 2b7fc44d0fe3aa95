# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/filetypes/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Built-in file type definitions grouped by topic.

Each module exports a ``FILETYPES: list[FileType]``; the modules are imported
lazily by [`multipartform.filetypes.instances`][].
"""
