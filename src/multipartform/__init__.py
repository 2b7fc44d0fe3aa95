# topmark:header:start
#
#   project      : MultipartForm
#   file         : __init__.py
#   file_relpath : src/multipartform/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""MultipartForm package.

MultipartForm turns structured records into ordered ``multipart/form-data``
fields and guards file uploads by emptiness, size and file signature. It exposes
a small typed API and a ``multipartform`` CLI.

Example:
    ```python
    from multipartform import ArrayEncodingStrategy, FileUpload, MultipartForm

    form = MultipartForm(ArrayEncodingStrategy.BRACKETS)
    form.fields({"name": "Jane", "tags": ["a", "b"]})
    # [Field(name='name', value='Jane'), Field(name='tags[]', value='a'), ...]

    upload = FileUpload.jpeg("avatar", "me.jpg")
    upload.validate(data)
    ```
"""

from __future__ import annotations

from multipartform.constants import MULTIPARTFORM_VERSION
from multipartform.conversion import MultipartForm
from multipartform.core.errors import (
    ConfigError,
    ContentError,
    ContentMismatchError,
    ContentTooShortError,
    EmptyDataError,
    EmptyFieldNameError,
    EmptyFilenameError,
    EncodingError,
    FileTooLargeError,
    InvalidFilenameError,
    InvalidMaxSizeError,
    MalformedBoundaryError,
    MaxSizeExceedsLimitError,
    MultipartFormError,
    SerializationFailureError,
    UnknownFileTypeError,
    UnsupportedNestingError,
    ValidationError,
)
from multipartform.encoding.fields import ArrayEncodingStrategy, Field, FieldEncoder, encode_fields
from multipartform.filetypes.base import ContentType, FileType
from multipartform.model.reflect import to_structured
from multipartform.model.values import (
    ABSENT,
    Absent,
    Array,
    Bool,
    Nested,
    Number,
    Scalar,
    StructuredValue,
)
from multipartform.registry.filetypes import FileTypeRegistry
from multipartform.upload import FileUpload

__version__ = MULTIPARTFORM_VERSION

__all__ = [
    "ABSENT",
    "Absent",
    "Array",
    "ArrayEncodingStrategy",
    "Bool",
    "ConfigError",
    "ContentError",
    "ContentMismatchError",
    "ContentTooShortError",
    "ContentType",
    "EmptyDataError",
    "EmptyFieldNameError",
    "EmptyFilenameError",
    "EncodingError",
    "Field",
    "FieldEncoder",
    "FileTooLargeError",
    "FileType",
    "FileTypeRegistry",
    "FileUpload",
    "InvalidFilenameError",
    "InvalidMaxSizeError",
    "MalformedBoundaryError",
    "MaxSizeExceedsLimitError",
    "MultipartForm",
    "MultipartFormError",
    "Nested",
    "Number",
    "Scalar",
    "SerializationFailureError",
    "StructuredValue",
    "UnknownFileTypeError",
    "UnsupportedNestingError",
    "ValidationError",
    "encode_fields",
    "to_structured",
]
