# topmark:header:start
#
#   project      : MultipartForm
#   file         : encode.py
#   file_relpath : src/multipartform/cli/commands/encode.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""MultipartForm `encode` command.

Reads a JSON object from a file or standard input and prints the form fields it
encodes to, one ``name=value`` line per field. With ``--render`` the complete
request body is printed instead, preceded by its ``Content-Type`` header line
and a blank line.

JSON numbers with a fraction or exponent are read as `Decimal`, so their text is
reproduced without binary floating-point rounding.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import IO, Any

import click

from multipartform.cli.cmd_common import get_console, resolve_config
from multipartform.cli.errors import CliDataError, CliUsageError
from multipartform.cli.options import EnumChoiceParam
from multipartform.constants import HEADER_CONTENT_TYPE
from multipartform.core.errors import EncodingError
from multipartform.encoding.fields import ArrayEncodingStrategy


def _load_json_object(stream: IO[str]) -> dict[str, Any]:
    try:
        value = json.load(stream, parse_float=Decimal)
    except json.JSONDecodeError as exc:
        raise CliDataError(f"Invalid JSON input: {exc}") from exc
    if not isinstance(value, dict):
        raise CliUsageError(f"Expected a JSON object, got {type(value).__name__}")
    return value


@click.command(
    name="encode",
    help="Encode a JSON object (from JSON_FILE or '-' for stdin) as form fields.",
)
@click.argument("json_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--strategy",
    "array_strategy",
    type=EnumChoiceParam(ArrayEncodingStrategy),
    default=None,
    help=f"Array naming ({', '.join(v.value for v in ArrayEncodingStrategy)}).",
)
@click.option(
    "--render",
    is_flag=True,
    help="Print the rendered multipart/form-data body instead of name=value lines.",
)
def encode_command(
    *,
    json_file: IO[str],
    array_strategy: ArrayEncodingStrategy | None = None,
    render: bool = False,
) -> None:
    """Encode a JSON object as form fields.

    Args:
        json_file (IO[str]): Open JSON source.
        array_strategy (ArrayEncodingStrategy | None): Array naming override.
        render (bool): Print the multipart body instead of field lines.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    record = _load_json_object(json_file)
    form = resolve_config(ctx, array_strategy=array_strategy).make_form()

    try:
        if render:
            body = form.encode(record)
            console.print(f"{HEADER_CONTENT_TYPE}: {form.content_type}")
            console.print()
            console.print(body.decode("utf-8"), nl=False)
            return
        fields = form.fields(record)
    except EncodingError as exc:
        raise CliDataError(str(exc)) from exc

    for f in fields:
        console.print(f"{f.name}={f.value}")
