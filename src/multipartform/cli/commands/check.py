# topmark:header:start
#
#   project      : MultipartForm
#   file         : check.py
#   file_relpath : src/multipartform/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""MultipartForm `check` command.

Validates a file as an upload of a given file type: non-empty, within the size
limit and matching the type's signature. Prints ``OK`` on success; on failure the
error message is printed on stderr and the exit code is ``65`` (``DATA_ERROR``).
"""

from __future__ import annotations

from pathlib import Path

import click

from multipartform.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    input_size,
    read_input_bytes,
    resolve_config,
)
from multipartform.cli.errors import CliConfigError, CliDataError, CliUsageError
from multipartform.core.errors import ConfigError, UnknownFileTypeError, ValidationError
from multipartform.registry.filetypes import FileTypeRegistry


@click.command(
    name="check",
    help="Validate FILE as an upload of the given file type.",
)
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--type",
    "type_name",
    required=True,
    help="File type identifier (see 'multipartform filetypes').",
)
@click.option(
    "--max-size",
    type=int,
    default=None,
    help="Maximum accepted size in bytes (default from config, else 10 MiB).",
)
@click.option(
    "--field-name",
    default=None,
    help="Form field name (default from config, else 'file').",
)
def check_command(
    *,
    file: Path,
    type_name: str,
    max_size: int | None = None,
    field_name: str | None = None,
) -> None:
    """Validate ``file`` against a registered file type.

    Args:
        file (Path): The file to validate.
        type_name (str): Registry name of the expected file type.
        max_size (int | None): Size limit override.
        field_name (str | None): Field name override.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    try:
        file_type = FileTypeRegistry.require(type_name)
    except UnknownFileTypeError as exc:
        raise CliUsageError(str(exc)) from exc

    config = resolve_config(ctx, max_size=max_size, field_name=field_name)
    try:
        upload = config.make_upload(file.name, file_type)
    except ConfigError as exc:
        raise CliConfigError(str(exc)) from exc

    try:
        # size limits apply before the file is loaded
        upload.check_size(input_size(file))
        data = read_input_bytes(file)
        upload.validate(data)
    except ValidationError as exc:
        raise CliDataError(str(exc)) from exc

    if get_effective_verbosity(ctx) > 0:
        console.print(
            f"OK: {file.name} ({file_type.name}, {upload.file_type.mime}, {len(data)} bytes, "
            f"field {upload.field_name!r})"
        )
    else:
        console.print(console.styled("OK", fg="green"))
