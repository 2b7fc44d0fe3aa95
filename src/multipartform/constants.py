# topmark:header:start
#
#   project      : MultipartForm
#   file         : constants.py
#   file_relpath : src/multipartform/constants.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""MultipartForm constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    MULTIPARTFORM_VERSION: str = get_version("multipartform")
except PackageNotFoundError:  # running from a source checkout
    MULTIPARTFORM_VERSION = "0.0.0"

KIB: Final[int] = 1024
MIB: Final[int] = 1024 * KIB
GIB: Final[int] = 1024 * MIB

# File upload size limits (bytes)
DEFAULT_MAX_FILE_SIZE: Final[int] = 10 * MIB
MAX_FILE_SIZE_LIMIT: Final[int] = 1 * GIB

DEFAULT_FIELD_NAME: Final[str] = "file"

# Characters that may not appear in an upload filename
PATH_SEPARATORS: Final[tuple[str, ...]] = ("/", "\\")

MULTIPART_FORM_DATA: Final[str] = "multipart/form-data"

HEADER_CONTENT_DISPOSITION: Final[str] = "Content-Disposition"
HEADER_CONTENT_TYPE: Final[str] = "Content-Type"

CRLF: Final[str] = "\r\n"

DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d"

CONFIG_FILE_NAME: Final[str] = "multipartform.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

FILETYPES_ENTRYPOINT_GROUP: Final[str] = "multipartform.filetypes"
