# topmark:header:start
#
#   project      : MultipartForm
#   file         : keys.py
#   file_relpath : src/multipartform/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Canonical TOML section and key names for MultipartForm configuration.

Keys defined here are the external configuration API as it appears in
``multipartform.toml`` and in ``[tool.multipartform]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by MultipartForm configuration.

    Example:
        ```toml
        [upload]
        field_name = "file"
        max_size = 10485760

        [encoding]
        array_strategy = "accumulate"
        date_format = "%Y-%m-%d"
        ```
    """

    # pyproject.toml nesting: [tool.multipartform]
    SECTION_TOOL: Final[str] = "tool"
    TOOL_NAME: Final[str] = "multipartform"

    # [upload]
    SECTION_UPLOAD: Final[str] = "upload"

    KEY_FIELD_NAME: Final[str] = "field_name"
    KEY_MAX_SIZE: Final[str] = "max_size"

    # [encoding]
    SECTION_ENCODING: Final[str] = "encoding"

    KEY_ARRAY_STRATEGY: Final[str] = "array_strategy"
    KEY_DATE_FORMAT: Final[str] = "date_format"
