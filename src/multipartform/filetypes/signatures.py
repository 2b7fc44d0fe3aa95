# topmark:header:start
#
#   project      : MultipartForm
#   file         : signatures.py
#   file_relpath : src/multipartform/filetypes/signatures.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Binary signature ("magic number") validators.

Each factory in this module returns a
[`ContentValidator`][multipartform.filetypes.base.ContentValidator] closed over a
fixed rule:

* `leading_bytes`: the buffer starts with one of several byte strings.
* `riff_container`: ``RIFF`` at offset 0 and a form type at offset 8 (WebP).
* `iso_bmff_brand`: an ISO-BMFF ``ftyp`` box with a given major brand
  (HEIC, AVIF). Buffers shorter than the 12-byte box header raise
  `ContentTooShortError` rather than a mismatch.
* `utf8_text`: the whole buffer decodes as UTF-8 (CSV).

On mismatch the validators raise `ContentMismatchError`, filling ``detected``
with the format recognized by `detect_content_type` when possible.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from multipartform.core.errors import ContentMismatchError, ContentTooShortError

if TYPE_CHECKING:
    from collections.abc import Callable

    from multipartform.filetypes.base import ContentValidator

JPEG_SIGNATURE: Final[bytes] = b"\xff\xd8\xff"
PNG_SIGNATURE: Final[bytes] = b"\x89PNG\r\n\x1a\n"
GIF87A_SIGNATURE: Final[bytes] = b"GIF87a"
GIF89A_SIGNATURE: Final[bytes] = b"GIF89a"
TIFF_LE_SIGNATURE: Final[bytes] = b"II*\x00"
TIFF_BE_SIGNATURE: Final[bytes] = b"MM\x00*"
BMP_SIGNATURE: Final[bytes] = b"BM"
PDF_SIGNATURE: Final[bytes] = b"%PDF-"

RIFF_MAGIC: Final[bytes] = b"RIFF"
WEBP_FORM: Final[bytes] = b"WEBP"

FTYP_BOX: Final[bytes] = b"ftyp"
HEIC_BRAND: Final[bytes] = b"heic"
AVIF_BRAND: Final[bytes] = b"avif"

# size (4) + box type (4) + major brand (4)
ISO_BMFF_HEADER_LEN: Final[int] = 12


def leading_bytes(expected: str, *signatures: bytes) -> ContentValidator:
    """Return a validator requiring the buffer to start with one of ``signatures``.

    Args:
        expected (str): Content type reported on mismatch.
        *signatures (bytes): Accepted leading byte sequences.

    Returns:
        ContentValidator: The validator.
    """
    if not signatures:
        raise ValueError("At least one signature is required")

    def _validate(data: bytes) -> None:
        if not data.startswith(signatures):
            raise ContentMismatchError(expected, detect_content_type(data))

    return _validate


def riff_container(expected: str, form_type: bytes) -> ContentValidator:
    """Return a validator for a RIFF container with the given form type (e.g. ``WEBP``)."""

    def _validate(data: bytes) -> None:
        if data[0:4] != RIFF_MAGIC or data[8:12] != form_type:
            raise ContentMismatchError(expected, detect_content_type(data))

    return _validate


def iso_bmff_brand(expected: str, brand: bytes) -> ContentValidator:
    """Return a validator for an ISO-BMFF file whose ``ftyp`` box has ``brand``.

    Raises `ContentTooShortError` for buffers shorter than the 12-byte box header.
    """

    def _validate(data: bytes) -> None:
        if len(data) < ISO_BMFF_HEADER_LEN:
            raise ContentTooShortError(expected, len(data), ISO_BMFF_HEADER_LEN)
        if data[4:8] != FTYP_BOX or data[8:12] != brand:
            raise ContentMismatchError(expected, detect_content_type(data))

    return _validate


def utf8_text(expected: str) -> ContentValidator:
    """Return a validator requiring the entire buffer to be valid UTF-8."""

    def _validate(data: bytes) -> None:
        try:
            data.decode("utf-8")
        except UnicodeDecodeError:
            raise ContentMismatchError(expected, detect_content_type(data)) from None

    return _validate


def _starts(*signatures: bytes) -> Callable[[bytes], bool]:
    return lambda data: data.startswith(signatures)


def _riff(form_type: bytes) -> Callable[[bytes], bool]:
    return lambda data: data[0:4] == RIFF_MAGIC and data[8:12] == form_type


def _ftyp(brand: bytes) -> Callable[[bytes], bool]:
    return lambda data: data[4:8] == FTYP_BOX and data[8:12] == brand


# Ordered (content type, probe) pairs used for sniffing
_SNIFFERS: Final[tuple[tuple[str, Callable[[bytes], bool]], ...]] = (
    ("image/jpeg", _starts(JPEG_SIGNATURE)),
    ("image/png", _starts(PNG_SIGNATURE)),
    ("image/gif", _starts(GIF87A_SIGNATURE, GIF89A_SIGNATURE)),
    ("image/webp", _riff(WEBP_FORM)),
    ("image/tiff", _starts(TIFF_LE_SIGNATURE, TIFF_BE_SIGNATURE)),
    ("image/heic", _ftyp(HEIC_BRAND)),
    ("image/avif", _ftyp(AVIF_BRAND)),
    ("application/pdf", _starts(PDF_SIGNATURE)),
    ("image/bmp", _starts(BMP_SIGNATURE)),
)


def detect_content_type(data: bytes) -> str | None:
    """Return the content type whose signature ``data`` carries, or None.

    Only formats with a binary signature are recognized; text formats are never
    reported.
    """
    for content_type, probe in _SNIFFERS:
        if probe(data):
            return content_type
    return None
