# topmark:header:start
#
#   project      : MultipartForm
#   file         : documents.py
#   file_relpath : src/multipartform/filetypes/builtins/documents.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Document and tabular data formats.

Exports:
    FILETYPES: PDF (``%PDF-`` signature), CSV (UTF-8 text check), and the
        metadata-only JSON, plain text, Word (``doc``/``docx``) and Excel
        (``xlsx``) descriptors.

Notes:
    - Office Open XML files are ZIP containers; their content is not inspected.
    - JSON is not parsed; any buffer is accepted.
"""

from __future__ import annotations

from multipartform.filetypes.base import ContentType, FileType
from multipartform.filetypes.signatures import PDF_SIGNATURE, leading_bytes, utf8_text

PDF = FileType(
    name="pdf",
    content_type=ContentType("application", "pdf"),
    extension="pdf",
    validate=leading_bytes("application/pdf", PDF_SIGNATURE),
    description="PDF document (%PDF-)",
    signature=True,
)

CSV = FileType(
    name="csv",
    content_type=ContentType("text", "csv"),
    extension="csv",
    validate=utf8_text("text/csv"),
    description="CSV text (must be valid UTF-8)",
    signature=True,
)

JSON = FileType(
    name="json",
    content_type=ContentType("application", "json"),
    extension="json",
    description="JSON document",
)

TEXT = FileType(
    name="text",
    content_type=ContentType("text", "plain"),
    extension="txt",
    description="Plain text",
)

DOC = FileType(
    name="doc",
    content_type=ContentType("application", "msword"),
    extension="doc",
    description="Microsoft Word 97-2003 document",
)

DOCX = FileType(
    name="docx",
    content_type=ContentType(
        "application", "vnd.openxmlformats-officedocument.wordprocessingml.document"
    ),
    extension="docx",
    description="Microsoft Word (Office Open XML) document",
)

EXCEL = FileType(
    name="excel",
    content_type=ContentType(
        "application", "vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    ),
    extension="xlsx",
    description="Microsoft Excel (Office Open XML) workbook",
)

FILETYPES: list[FileType] = [PDF, CSV, JSON, TEXT, DOC, DOCX, EXCEL]
