# topmark:header:start
#
#   project      : MultipartForm
#   file         : version.py
#   file_relpath : src/multipartform/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""MultipartForm `version` command."""

from __future__ import annotations

import json

import click

from multipartform.cli.cmd_common import get_console
from multipartform.cli.options import EnumChoiceParam, OutputFormat
from multipartform.constants import MULTIPARTFORM_VERSION


@click.command(
    name="version",
    help="Show the installed version of MultipartForm.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Print the version as installed in the current Python environment."""
    console = get_console(click.get_current_context())

    if output_format in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": MULTIPARTFORM_VERSION}))
    else:
        console.print(console.styled(MULTIPARTFORM_VERSION, bold=True))
