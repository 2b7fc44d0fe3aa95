# topmark:header:start
#
#   project      : MultipartForm
#   file         : detect.py
#   file_relpath : src/multipartform/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""MultipartForm `detect` command.

Prints the content type recognized from a file's leading bytes, or ``unknown``.
"""

from __future__ import annotations

from pathlib import Path

import click

from multipartform.cli.cmd_common import get_console, get_effective_verbosity, read_input_bytes
from multipartform.filetypes.signatures import detect_content_type
from multipartform.registry.filetypes import FileTypeRegistry


@click.command(
    name="detect",
    help="Print the content type recognized from FILE's signature.",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
def detect_command(*, file: Path) -> None:
    """Sniff the content type of ``file``.

    With ``-v``, the registered file types for the detected content type are
    listed as well.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    detected = detect_content_type(read_input_bytes(file))
    if detected is None:
        console.print("unknown")
        return

    console.print(detected)
    if get_effective_verbosity(ctx) > 0:
        names = [ft.name for ft in FileTypeRegistry.for_content_type(detected)]
        if names:
            console.print(f"  file types: {', '.join(names)}")
