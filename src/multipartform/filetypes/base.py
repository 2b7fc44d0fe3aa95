# topmark:header:start
#
#   project      : MultipartForm
#   file         : base.py
#   file_relpath : src/multipartform/filetypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""File type descriptors: content type, extension and content validator.

A [`FileType`][multipartform.filetypes.base.FileType] binds a MIME content type
and a filename extension to a `ContentValidator`, a callable that inspects a
byte buffer and raises a [`ContentError`][multipartform.core.errors.ContentError]
when the buffer does not look like the declared format.

Descriptors are immutable and reusable across any number of validations. The
catalog is open: new formats are supported by creating new descriptors (and
optionally registering them), never by editing a central dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from multipartform.config.logging import get_logger

if TYPE_CHECKING:
    from multipartform.config.logging import MultipartFormLogger

logger: MultipartFormLogger = get_logger(__name__)


@runtime_checkable
class ContentValidator(Protocol):
    """Protocol for content validators.

    A content validator inspects the leading bytes (or the whole buffer, for
    text formats) and returns ``None`` when the buffer matches. It must be fast,
    side-effect free and thread safe.
    """

    def __call__(self, data: bytes) -> None:
        """Check that ``data`` matches the expected format.

        Args:
            data (bytes): The candidate buffer.

        Raises:
            ContentError: If the buffer does not match.
        """
        ...


def accept_any(data: bytes) -> None:  # noqa: ARG001
    """Content validator that accepts every buffer (metadata-only file types)."""
    return None


@dataclass(frozen=True, slots=True)
class ContentType:
    """A MIME content type such as ``image/png``.

    Attributes:
        type (str): Top-level media type (``"image"``).
        subtype (str): Media subtype (``"png"``).
        parameters (tuple[tuple[str, str], ...]): Optional ``(name, value)``
            parameters, rendered in order.
    """

    type: str
    subtype: str
    parameters: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        params = "".join(f"; {name}={value}" for name, value in self.parameters)
        return f"{self.type}/{self.subtype}{params}"

    @property
    def essence(self) -> str:
        """Return ``type/subtype`` without parameters."""
        return f"{self.type}/{self.subtype}"

    @classmethod
    def parse(cls, text: str) -> ContentType:
        """Parse ``type/subtype[; name=value ...]``.

        Type and subtype are lower-cased; parameter values are kept verbatim
        (surrounding quotes are removed).

        Raises:
            ValueError: If ``text`` has no ``type/subtype`` part.
        """
        head, *raw_params = (part.strip() for part in text.split(";"))
        media_type, sep, subtype = head.partition("/")
        if not sep or not media_type or not subtype:
            raise ValueError(f"Invalid content type: {text!r}")
        params: list[tuple[str, str]] = []
        for raw in raw_params:
            if not raw:
                continue
            name, _, value = raw.partition("=")
            params.append((name.strip().lower(), value.strip().strip('"')))
        return cls(media_type.lower(), subtype.lower(), tuple(params))


@dataclass(frozen=True, slots=True)
class FileType:
    """Describes a file format accepted for upload.

    Attributes:
        name (str): Registry identifier (e.g. ``"png"``).
        content_type (ContentType): MIME type sent in the body part header.
        extension (str): Canonical filename extension without the dot (``"png"``).
        validate (ContentValidator): Signature check; accepts any buffer by default.
        description (str): Human-readable description.
        signature (bool): True if ``validate`` inspects content (false for
            metadata-only types).

    Example:
        A custom XML descriptor:

        ```python
        def looks_like_xml(data: bytes) -> None:
            if not data.startswith(b"<?xml"):
                raise ContentMismatchError(expected="application/xml")

        xml = FileType(
            name="xml",
            content_type=ContentType("application", "xml"),
            extension="xml",
            validate=looks_like_xml,
            signature=True,
        )
        ```
    """

    name: str
    content_type: ContentType
    extension: str
    validate: ContentValidator = field(default=accept_any, compare=False)
    description: str = ""
    signature: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("FileType.name is required.")
        if self.extension.startswith("."):
            raise ValueError(f"FileType.extension must not start with a dot: {self.extension!r}")

    @property
    def mime(self) -> str:
        """Return the content type as header text."""
        return str(self.content_type)

    def matches_extension(self, filename: str) -> bool:
        """Return True if ``filename`` ends with this type's extension (case-insensitive)."""
        return filename.lower().endswith("." + self.extension.lower())
