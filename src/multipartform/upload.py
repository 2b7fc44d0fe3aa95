# topmark:header:start
#
#   project      : MultipartForm
#   file         : upload.py
#   file_relpath : src/multipartform/upload.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Validated single-file uploads.

A [`FileUpload`][multipartform.upload.FileUpload] binds a form field name, a
filename, a [`FileType`][multipartform.filetypes.base.FileType] and a maximum
size. Construction checks every argument, so an instance that exists is always
valid. `FileUpload.validate` then checks candidate bytes in a fixed order:

1. emptiness (`EmptyDataError`);
2. size (`FileTooLargeError`);
3. content, delegated to the file type's validator (`ContentError`).

The order decides which single error a caller sees: an oversized buffer is
reported as too large even when its signature is also wrong.

Example:
    ```python
    from multipartform import FileUpload, filetypes
    from multipartform.constants import MIB

    upload = FileUpload("avatar", "profile.jpg", filetypes.JPEG, max_size=5 * MIB)
    upload.validate(data)
    body = upload.render(data)
    headers = {"Content-Type": upload.content_type}
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field

from multipartform.config.logging import get_logger
from multipartform.constants import (
    DEFAULT_FIELD_NAME,
    DEFAULT_MAX_FILE_SIZE,
    MAX_FILE_SIZE_LIMIT,
    MULTIPART_FORM_DATA,
    PATH_SEPARATORS,
)
from multipartform.core.errors import (
    EmptyDataError,
    EmptyFieldNameError,
    EmptyFilenameError,
    FileTooLargeError,
    InvalidFilenameError,
    InvalidMaxSizeError,
    MaxSizeExceedsLimitError,
)
from multipartform.envelope.boundary import generate_boundary
from multipartform.envelope.render import BodyPart, render_multipart
from multipartform.filetypes.builtins.documents import CSV, EXCEL, PDF
from multipartform.filetypes.builtins.images import JPEG
from multipartform.filetypes.base import FileType

logger = get_logger(__name__)


def check_max_size(max_size: int) -> int:
    """Return ``max_size`` if it lies in ``(0, 1 GiB]``.

    Raises:
        InvalidMaxSizeError: If ``max_size`` is not an ``int`` (``bool`` included), or is
            zero or negative.
        MaxSizeExceedsLimitError: If ``max_size`` exceeds 1 GiB.
    """
    if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size <= 0:
        raise InvalidMaxSizeError(max_size)
    if max_size > MAX_FILE_SIZE_LIMIT:
        raise MaxSizeExceedsLimitError(max_size)
    return max_size


@dataclass(frozen=True)
class FileUpload:
    """A validated file upload definition.

    Attributes:
        field_name (str): Form field name; must not be empty.
        filename (str): Filename sent in the Content-Disposition header; must not be
            empty or contain ``/`` or ``\\``.
        file_type (FileType): Expected format, including its content validator.
        max_size (int): Maximum accepted size in bytes, ``0 < max_size <= 1 GiB``.
            Defaults to 10 MiB.
        boundary (str): Multipart boundary, generated once per instance.

    Raises:
        ConfigError: One of its subclasses when an argument is invalid.
    """

    field_name: str
    filename: str
    file_type: FileType
    max_size: int = DEFAULT_MAX_FILE_SIZE
    boundary: str = field(default_factory=generate_boundary, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.field_name:
            raise EmptyFieldNameError()
        if not self.filename:
            raise EmptyFilenameError()
        if any(sep in self.filename for sep in PATH_SEPARATORS):
            raise InvalidFilenameError(self.filename)
        check_max_size(self.max_size)

    @property
    def content_type(self) -> str:
        """Return the request Content-Type header value including the boundary."""
        return f"{MULTIPART_FORM_DATA}; boundary={self.boundary}"

    def validate(self, data: bytes) -> None:
        """Check ``data`` against this upload's constraints.

        Args:
            data (bytes): The candidate file content.

        Raises:
            EmptyDataError: If ``data`` is empty.
            FileTooLargeError: If ``data`` is larger than ``max_size``.
            ContentError: If the file type's validator rejects ``data``.
        """
        size = len(data)
        self.check_size(size)
        self.file_type.validate(data)
        logger.trace(
            "Accepted %d bytes as %s for field %r", size, self.file_type.name, self.field_name
        )

    def check_size(self, size: int) -> None:
        """Check a byte count before the content is read.

        Raises:
            EmptyDataError: If ``size`` is zero.
            FileTooLargeError: If ``size`` is larger than ``max_size``.
        """
        if size == 0:
            raise EmptyDataError()
        if size > self.max_size:
            raise FileTooLargeError(size=size, max_size=self.max_size)

    def apply(self, data: bytes) -> bytes:
        """Validate ``data`` and return it unchanged."""
        self.validate(data)
        return data

    def render(self, data: bytes) -> bytes:
        """Validate ``data`` and render it as a single-file multipart body.

        Returns:
            bytes: The body to send with `content_type` as the request Content-Type.
        """
        self.validate(data)
        part = BodyPart.file(self.field_name, self.filename, self.file_type.mime, data)
        return render_multipart(self.boundary, [part])

    # ----- Factories -----

    @classmethod
    def _for_type(
        cls,
        file_type: FileType,
        field_name: str,
        filename: str | None,
        max_size: int,
    ) -> FileUpload:
        return cls(
            field_name=field_name,
            filename=filename if filename is not None else f"file.{file_type.extension}",
            file_type=file_type,
            max_size=max_size,
        )

    @classmethod
    def csv(
        cls,
        field_name: str = DEFAULT_FIELD_NAME,
        filename: str | None = None,
        max_size: int = DEFAULT_MAX_FILE_SIZE,
    ) -> FileUpload:
        """Return a CSV upload (default filename ``file.csv``)."""
        return cls._for_type(CSV, field_name, filename, max_size)

    @classmethod
    def pdf(
        cls,
        field_name: str = DEFAULT_FIELD_NAME,
        filename: str | None = None,
        max_size: int = DEFAULT_MAX_FILE_SIZE,
    ) -> FileUpload:
        """Return a PDF upload (default filename ``file.pdf``)."""
        return cls._for_type(PDF, field_name, filename, max_size)

    @classmethod
    def excel(
        cls,
        field_name: str = DEFAULT_FIELD_NAME,
        filename: str | None = None,
        max_size: int = DEFAULT_MAX_FILE_SIZE,
    ) -> FileUpload:
        """Return an Excel upload (default filename ``file.xlsx``)."""
        return cls._for_type(EXCEL, field_name, filename, max_size)

    @classmethod
    def jpeg(
        cls,
        field_name: str = DEFAULT_FIELD_NAME,
        filename: str | None = None,
        max_size: int = DEFAULT_MAX_FILE_SIZE,
    ) -> FileUpload:
        """Return a JPEG upload (default filename ``file.jpg``)."""
        return cls._for_type(JPEG, field_name, filename, max_size)
