# topmark:header:start
#
#   project      : MultipartForm
#   file         : main.py
#   file_relpath : src/multipartform/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""MultipartForm command-line interface.

Group-level options (``--config``, ``-v`` / ``-q``) are processed once and their
results placed into ``ctx.obj`` for the subcommands:

- ``console``: the [`ClickConsole`][multipartform.cli.console.ClickConsole];
- ``verbosity_level``: the number of ``-v`` flags;
- ``config_draft``: a `MutableConfig` built from defaults and the explicit or
  discovered config file.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from multipartform.cli.commands.check import check_command
from multipartform.cli.commands.detect import detect_command
from multipartform.cli.commands.encode import encode_command
from multipartform.cli.commands.filetypes import filetypes_command
from multipartform.cli.commands.version import version_command
from multipartform.cli.console import ClickConsole
from multipartform.cli.options import common_verbose_options, resolve_verbosity
from multipartform.config.logging import get_logger, resolve_env_log_level, setup_logging
from multipartform.config.model import MutableConfig

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    config_file: Path | None,
) -> None:
    """Initialize shared state (console, verbosity, logging, config) on the context.

    The ``MULTIPARTFORM_LOG_LEVEL`` environment variable takes precedence over
    ``-v`` / ``-q`` for internal logging.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose

    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    enable_color = ctx.color if ctx.color is not None else sys.stdout.isatty()
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    draft = MutableConfig.load(config_file=config_file)
    logger.debug("Config sources: %s", draft.config_files)
    ctx.obj["config_draft"] = draft


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Encode records as multipart/form-data and validate file uploads.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Use this config file instead of discovering multipartform.toml / pyproject.toml.",
)
@common_verbose_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    config_file: Path | None,
) -> None:
    """Entry point for the MultipartForm CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, config_file=config_file)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'multipartform check FILE --type NAME' to validate an upload.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(check_command)

cli.add_command(detect_command)

cli.add_command(filetypes_command)

cli.add_command(encode_command)

if __name__ == "__main__":
    cli()
