# topmark:header:start
#
#   project      : MultipartForm
#   file         : conversion.py
#   file_relpath : src/multipartform/conversion.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Encode whole records as ``multipart/form-data`` request bodies.

[`MultipartForm`][multipartform.conversion.MultipartForm] ties the reflection
layer, the field encoder and the envelope renderer together:

```python
form = MultipartForm(ArrayEncodingStrategy.BRACKETS)
body = form.encode({"name": "Jane", "tags": ["a", "b"]})
headers = {"Content-Type": form.content_type}
```

Every field becomes one text body part, in encoder order.
"""

from __future__ import annotations

from typing import Any

from multipartform.config.logging import get_logger
from multipartform.constants import DEFAULT_DATE_FORMAT, MULTIPART_FORM_DATA
from multipartform.encoding.fields import ArrayEncodingStrategy, Field, FieldEncoder
from multipartform.envelope.boundary import generate_boundary
from multipartform.envelope.render import BodyPart, render_multipart
from multipartform.model.reflect import to_structured

logger = get_logger(__name__)


class MultipartForm:
    """A reusable form encoder with a fixed boundary.

    Args:
        array_strategy (ArrayEncodingStrategy): Naming policy for array elements.
        date_format (str): ``strftime`` pattern used for dates found in records.

    Attributes:
        boundary (str): Boundary token, generated once at construction.
    """

    def __init__(
        self,
        array_strategy: ArrayEncodingStrategy = ArrayEncodingStrategy.ACCUMULATE_VALUES,
        *,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        self.encoder: FieldEncoder = FieldEncoder(array_strategy)
        self.date_format: str = date_format
        self.boundary: str = generate_boundary()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(array_strategy={self.array_strategy}, "
            f"date_format={self.date_format!r})"
        )

    @property
    def array_strategy(self) -> ArrayEncodingStrategy:
        return self.encoder.array_strategy

    @property
    def content_type(self) -> str:
        """Return the request Content-Type header value including the boundary."""
        return f"{MULTIPART_FORM_DATA}; boundary={self.boundary}"

    def fields(self, value: Any) -> list[Field]:
        """Reflect ``value`` and return its ordered form fields.

        Raises:
            UnsupportedNestingError: If ``value`` cannot be represented.
            SerializationFailureError: If a nested record cannot be serialized.
        """
        return self.encoder.encode(to_structured(value, date_format=self.date_format))

    def encode(self, value: Any) -> bytes:
        """Encode ``value`` as a complete multipart body.

        Returns:
            bytes: The body; send it with `content_type`.
        """
        fields = self.fields(value)
        logger.debug("Rendering %d field(s) with boundary %s", len(fields), self.boundary)
        return render_multipart(self.boundary, [BodyPart.from_field(f) for f in fields])
