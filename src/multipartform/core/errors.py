# topmark:header:start
#
#   project      : MultipartForm
#   file         : errors.py
#   file_relpath : src/multipartform/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Exception taxonomy for MultipartForm.

All errors derive from `MultipartFormError` and fall into three families:

* `ConfigError`: raised while constructing a
  [`FileUpload`][multipartform.upload.FileUpload]; no instance is produced.
* `ValidationError`: raised by ``FileUpload.validate()`` and by
  ``FileType.validate()`` (the `ContentError` subtree).
* `EncodingError`: raised by the field encoder, the serializer fallback and the
  envelope renderer.

Every error is recoverable and carries a human-readable message. Callers can
match on the concrete class, or on the family base class. The structured
attributes (``size``, ``max_size``, ``expected``, ...) are kept on the instance
so that callers can build their own diagnostics.

Usage:
    ```python
    try:
        upload.validate(data)
    except FileTooLargeError as exc:
        print(f"{exc.size} > {exc.max_size}")
    except ContentError as exc:
        print(exc)
    ```
"""

from __future__ import annotations

from typing import Final

from multipartform.constants import MAX_FILE_SIZE_LIMIT

_UNKNOWN: Final[str] = "unknown"


class MultipartFormError(Exception):
    """Base class for all MultipartForm errors."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


# ----- Construction-time errors -----


class ConfigError(MultipartFormError, ValueError):
    """Invalid ``FileUpload`` construction arguments."""


class EmptyFieldNameError(ConfigError):
    """The form field name is empty."""

    def __init__(self) -> None:
        super().__init__("Field name cannot be empty")


class EmptyFilenameError(ConfigError):
    """The upload filename is empty."""

    def __init__(self) -> None:
        super().__init__("Filename cannot be empty")


class InvalidFilenameError(ConfigError):
    """The upload filename contains a path separator (``/`` or ``\\``)."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"Filename '{filename}' contains invalid path separators")
        self.filename: str = filename


class InvalidMaxSizeError(ConfigError):
    """The maximum size is not an integer, or is zero or negative."""

    def __init__(self, max_size: object) -> None:
        super().__init__(f"Max size {max_size!r} must be positive")
        self.max_size: object = max_size


class MaxSizeExceedsLimitError(ConfigError):
    """The maximum size exceeds the 1 GiB hard limit."""

    def __init__(self, max_size: int) -> None:
        super().__init__(
            f"Max size {max_size} bytes exceeds maximum limit of 1GB ({MAX_FILE_SIZE_LIMIT} bytes)"
        )
        self.max_size: int = max_size


# ----- Validation errors -----


class ValidationError(MultipartFormError):
    """A candidate byte buffer was rejected."""


class EmptyDataError(ValidationError):
    """No file data was provided."""

    def __init__(self) -> None:
        super().__init__("Empty file data")


class FileTooLargeError(ValidationError):
    """The buffer is larger than the configured maximum size."""

    def __init__(self, size: int, max_size: int) -> None:
        super().__init__(f"File size {size} exceeds maximum allowed size of {max_size} bytes")
        self.size: int = size
        self.max_size: int = max_size


class ContentError(ValidationError):
    """The buffer content does not satisfy a file type's signature rule."""


class ContentMismatchError(ContentError):
    """The leading bytes do not match the declared file type.

    Attributes:
        expected (str): The expected content type (e.g. ``"image/png"``).
        detected (str | None): The content type recognized from the buffer's
            signature, if any.
    """

    def __init__(self, expected: str, detected: str | None = None) -> None:
        super().__init__(
            f"Content type mismatch. Expected: {expected}, Detected: {detected or _UNKNOWN}"
        )
        self.expected: str = expected
        self.detected: str | None = detected


class ContentTooShortError(ContentError):
    """The buffer is shorter than the minimum needed to inspect its container header.

    Raised instead of `ContentMismatchError` so that callers can report a
    truncated upload rather than a wrong format.
    """

    def __init__(self, expected: str, size: int, minimum: int) -> None:
        super().__init__(
            f"Content too short for {expected}: {size} bytes, at least {minimum} required"
        )
        self.expected: str = expected
        self.size: int = size
        self.minimum: int = minimum


# ----- Encoding errors -----


class EncodingError(MultipartFormError):
    """A value could not be encoded as multipart form data."""


class UnsupportedNestingError(EncodingError):
    """A container shape cannot be represented as form fields.

    Attributes:
        path (str): Dotted location of the offending value (empty at the root).
    """

    def __init__(self, path: str, reason: str) -> None:
        where = f" at '{path}'" if path else ""
        super().__init__(f"Unsupported nesting{where}: {reason}")
        self.path: str = path
        self.reason: str = reason


class SerializationFailureError(EncodingError):
    """The text serializer fallback could not serialize a nested value."""

    def __init__(self, path: str, reason: str) -> None:
        where = f" at '{path}'" if path else ""
        super().__init__(f"Failed to serialize nested value{where}: {reason}")
        self.path: str = path
        self.reason: str = reason


class MalformedBoundaryError(EncodingError):
    """The multipart boundary is empty or contains disallowed characters."""

    def __init__(self, boundary: str) -> None:
        super().__init__(f"Malformed multipart boundary: {boundary!r}")
        self.boundary: str = boundary


# ----- Registry errors -----


class UnknownFileTypeError(MultipartFormError, KeyError):
    """No file type is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown file type: {name}")
        self.name: str = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])
