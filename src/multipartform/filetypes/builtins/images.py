# topmark:header:start
#
#   project      : MultipartForm
#   file         : images.py
#   file_relpath : src/multipartform/filetypes/builtins/images.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Image formats.

Exports:
    FILETYPES: JPEG, PNG, GIF, WebP, TIFF, BMP, HEIC, AVIF (all with signature
        validation) and SVG (metadata only).
    ImageKind: Enum naming the signature-checked image formats.
    image: Return the built-in descriptor for an `ImageKind`.

Notes:
    - HEIC and AVIF are ISO-BMFF containers; buffers shorter than the 12-byte
      ``ftyp`` box header are reported as too short, not as a mismatch.
    - SVG is XML text and has no binary signature.
"""

from __future__ import annotations

from enum import Enum

from multipartform.filetypes.base import ContentType, FileType
from multipartform.filetypes.signatures import (
    AVIF_BRAND,
    BMP_SIGNATURE,
    GIF87A_SIGNATURE,
    GIF89A_SIGNATURE,
    HEIC_BRAND,
    JPEG_SIGNATURE,
    PNG_SIGNATURE,
    TIFF_BE_SIGNATURE,
    TIFF_LE_SIGNATURE,
    WEBP_FORM,
    iso_bmff_brand,
    leading_bytes,
    riff_container,
)


def _image(subtype: str) -> ContentType:
    return ContentType("image", subtype)


JPEG = FileType(
    name="jpeg",
    content_type=_image("jpeg"),
    extension="jpg",
    validate=leading_bytes("image/jpeg", JPEG_SIGNATURE),
    description="JPEG image (FF D8 FF)",
    signature=True,
)

PNG = FileType(
    name="png",
    content_type=_image("png"),
    extension="png",
    validate=leading_bytes("image/png", PNG_SIGNATURE),
    description="PNG image (89 50 4E 47 0D 0A 1A 0A)",
    signature=True,
)

GIF = FileType(
    name="gif",
    content_type=_image("gif"),
    extension="gif",
    validate=leading_bytes("image/gif", GIF87A_SIGNATURE, GIF89A_SIGNATURE),
    description="GIF image (GIF87a / GIF89a)",
    signature=True,
)

WEBP = FileType(
    name="webp",
    content_type=_image("webp"),
    extension="webp",
    validate=riff_container("image/webp", WEBP_FORM),
    description="WebP image (RIFF container, WEBP form)",
    signature=True,
)

TIFF = FileType(
    name="tiff",
    content_type=_image("tiff"),
    extension="tiff",
    validate=leading_bytes("image/tiff", TIFF_LE_SIGNATURE, TIFF_BE_SIGNATURE),
    description="TIFF image (little- or big-endian)",
    signature=True,
)

BMP = FileType(
    name="bmp",
    content_type=_image("bmp"),
    extension="bmp",
    validate=leading_bytes("image/bmp", BMP_SIGNATURE),
    description="BMP image (BM)",
    signature=True,
)

HEIC = FileType(
    name="heic",
    content_type=_image("heic"),
    extension="heic",
    validate=iso_bmff_brand("image/heic", HEIC_BRAND),
    description="HEIC image (ISO-BMFF, heic brand)",
    signature=True,
)

AVIF = FileType(
    name="avif",
    content_type=_image("avif"),
    extension="avif",
    validate=iso_bmff_brand("image/avif", AVIF_BRAND),
    description="AVIF image (ISO-BMFF, avif brand)",
    signature=True,
)

SVG = FileType(
    name="svg",
    content_type=_image("svg+xml"),
    extension="svg",
    description="SVG vector image (no signature check)",
)


class ImageKind(Enum):
    """Signature-checked image formats."""

    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    WEBP = "webp"
    TIFF = "tiff"
    BMP = "bmp"
    HEIC = "heic"
    AVIF = "avif"


_BY_KIND: dict[ImageKind, FileType] = {
    ImageKind.JPEG: JPEG,
    ImageKind.PNG: PNG,
    ImageKind.GIF: GIF,
    ImageKind.WEBP: WEBP,
    ImageKind.TIFF: TIFF,
    ImageKind.BMP: BMP,
    ImageKind.HEIC: HEIC,
    ImageKind.AVIF: AVIF,
}


def image(kind: ImageKind) -> FileType:
    """Return the built-in descriptor for an image kind."""
    return _BY_KIND[kind]


FILETYPES: list[FileType] = [JPEG, PNG, GIF, WEBP, TIFF, BMP, HEIC, AVIF, SVG]
