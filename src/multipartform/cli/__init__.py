# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""MultipartForm CLI package.

The console script entry point is defined in ``pyproject.toml``:

    [project.scripts]
    multipartform = "multipartform.cli.main:cli"

All subcommands live in [`multipartform.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
