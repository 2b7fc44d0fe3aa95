# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Click subcommands of the ``multipartform`` CLI."""

from __future__ import annotations
