# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Core primitives shared across MultipartForm.

``multipartform.core`` holds the exception hierarchy. It is safe to import from
anywhere in the codebase (CLI, config, encoder, tests) and has no side effects.
"""

from __future__ import annotations
