# topmark:header:start
#
#   project      : MultipartForm
#   file         : __main__.py
#   file_relpath : src/multipartform/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Module entry point for running MultipartForm via ``python -m multipartform``.

Equivalent to running the ``multipartform`` console script.

Examples:
    Validate a file::

        python -m multipartform check avatar.png --type png
"""

from __future__ import annotations

from multipartform.cli.main import cli

if __name__ == "__main__":
    cli()
