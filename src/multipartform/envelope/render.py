# topmark:header:start
#
#   project      : MultipartForm
#   file         : render.py
#   file_relpath : src/multipartform/envelope/render.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Render body parts into a ``multipart/form-data`` byte stream.

Layout (RFC 2046 / RFC 7578), with CRLF line endings throughout:

```text
--<boundary>
Content-Disposition: form-data; name="a"

<content>
--<boundary>
...
--<boundary>--
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from multipartform.constants import CRLF, HEADER_CONTENT_DISPOSITION, HEADER_CONTENT_TYPE
from multipartform.core.errors import MalformedBoundaryError
from multipartform.envelope.boundary import is_valid_boundary
from multipartform.envelope.disposition import format_content_disposition

if TYPE_CHECKING:
    from collections.abc import Iterable

    from multipartform.encoding.fields import Field


@dataclass(frozen=True)
class BodyPart:
    """One part of a multipart body.

    Attributes:
        headers (tuple[tuple[str, str], ...]): Header ``(name, value)`` pairs in order.
        content (bytes): The raw part content.
    """

    headers: tuple[tuple[str, str], ...]
    content: bytes = field(repr=False)

    @classmethod
    def text(cls, name: str, value: str) -> BodyPart:
        """Return a text part for a form field."""
        return cls(
            headers=((HEADER_CONTENT_DISPOSITION, format_content_disposition(name)),),
            content=value.encode("utf-8"),
        )

    @classmethod
    def file(cls, name: str, filename: str, content_type: str, content: bytes) -> BodyPart:
        """Return a file part."""
        return cls(
            headers=(
                (HEADER_CONTENT_DISPOSITION, format_content_disposition(name, filename)),
                (HEADER_CONTENT_TYPE, content_type),
            ),
            content=content,
        )

    @classmethod
    def from_field(cls, form_field: Field) -> BodyPart:
        """Return the text part for an encoded `Field`."""
        return cls.text(form_field.name, form_field.value)


def render_multipart(boundary: str, parts: Iterable[BodyPart]) -> bytes:
    """Render ``parts`` as a framed multipart body.

    Args:
        boundary (str): The boundary token (without leading dashes).
        parts (Iterable[BodyPart]): Parts in output order. Zero parts yields just
            the closing delimiter.

    Returns:
        bytes: The encoded body.

    Raises:
        MalformedBoundaryError: If ``boundary`` is not a valid boundary token.
    """
    if not is_valid_boundary(boundary):
        raise MalformedBoundaryError(boundary)

    delimiter = f"--{boundary}{CRLF}".encode("ascii")
    chunks: list[bytes] = []
    for part in parts:
        chunks.append(delimiter)
        for name, value in part.headers:
            chunks.append(f"{name}: {value}{CRLF}".encode())
        chunks.append(CRLF.encode("ascii"))
        chunks.append(part.content)
        chunks.append(CRLF.encode("ascii"))
    chunks.append(f"--{boundary}--{CRLF}".encode("ascii"))
    return b"".join(chunks)
