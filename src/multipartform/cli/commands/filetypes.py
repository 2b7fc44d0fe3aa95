# topmark:header:start
#
#   project      : MultipartForm
#   file         : filetypes.py
#   file_relpath : src/multipartform/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""MultipartForm `filetypes` command.

Lists all registered file types with their identifiers, content types and
descriptions.
"""

from __future__ import annotations

import json

import click

from multipartform.cli.cmd_common import get_console
from multipartform.cli.options import EnumChoiceParam, OutputFormat
from multipartform.registry.filetypes import FileTypeMeta, FileTypeRegistry


def _summary(meta: FileTypeMeta) -> dict[str, object]:
    return {"name": meta.name, "description": meta.description}


@click.command(
    name="filetypes",
    help="List all registered file types.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (content type, extension, signature check).",
)
def filetypes_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List registered file types.

    Args:
        show_details (bool): If True, include content type, extension and whether
            the type checks a signature.
        output_format (OutputFormat | None): ``default``, ``json`` or ``ndjson``.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    metas = list(FileTypeRegistry.iter_meta())
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        payload = [m.to_dict() if show_details else _summary(m) for m in metas]
        console.print(json.dumps(payload, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for m in metas:
            console.print(json.dumps(m.to_dict() if show_details else _summary(m)))
        return

    width = max((len(m.name) for m in metas), default=0)
    for m in metas:
        if show_details:
            check = "signature" if m.signature else "metadata"
            console.print(
                f"{console.styled(m.name.ljust(width), bold=True)}  "
                f"{m.content_type:<45} .{m.extension:<5} {check:<9}  {m.description}"
            )
        else:
            console.print(f"{console.styled(m.name.ljust(width), bold=True)}  {m.description}")
