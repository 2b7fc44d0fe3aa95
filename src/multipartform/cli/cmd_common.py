# topmark:header:start
#
#   project      : MultipartForm
#   file         : cmd_common.py
#   file_relpath : src/multipartform/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Helpers shared by the MultipartForm subcommands.

Commands read shared state from ``ctx.obj`` (set up once by the group in
[`multipartform.cli.main`][]) and translate library exceptions into CLI errors
with the matching exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from multipartform.cli.errors import CliConfigError, CliFileNotFoundError, CliIOError
from multipartform.config.logging import get_logger
from multipartform.config.model import MutableConfig
from multipartform.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from multipartform.cli.console import ClickConsole
    from multipartform.config.logging import MultipartFormLogger
    from multipartform.config.model import Config

logger: MultipartFormLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the context by the CLI group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (number of ``-v`` flags, 0 if none)."""
    return int(ctx.obj.get("verbosity_level", 0))


def resolve_config(ctx: click.Context, **overrides: Any) -> Config:
    """Merge CLI overrides into the loaded config draft and freeze it.

    Warnings collected while loading are shown on stderr.

    Raises:
        CliConfigError: If the merged configuration is invalid.
    """
    ctx.ensure_object(dict)
    draft: MutableConfig = ctx.obj.get("config_draft") or MutableConfig.from_defaults()
    # merge into a copy: apply_cli_args mutates in place
    draft = draft.merge_with(MutableConfig()).apply_cli_args(overrides)
    console = get_console(ctx)
    for message in draft.diagnostics:
        console.warn(message)
    try:
        return draft.freeze()
    except ConfigError as exc:
        raise CliConfigError(str(exc)) from exc


def read_input_bytes(path: Path) -> bytes:
    """Read ``path`` in binary mode, mapping OS errors to CLI errors.

    Raises:
        CliFileNotFoundError: If ``path`` does not exist.
        CliIOError: If ``path`` cannot be read.
    """
    if not path.exists():
        raise CliFileNotFoundError(f"File not found: {path}")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise CliIOError(f"Cannot read {path}: {exc}") from exc
    logger.debug("Read %d bytes from %s", len(data), path)
    return data


def input_size(path: Path) -> int:
    """Return the size of ``path`` in bytes without reading it.

    Raises:
        CliFileNotFoundError: If ``path`` does not exist.
        CliIOError: If ``path`` cannot be inspected.
    """
    try:
        return path.stat().st_size
    except FileNotFoundError as exc:
        raise CliFileNotFoundError(f"File not found: {path}") from exc
    except OSError as exc:
        raise CliIOError(f"Cannot read {path}: {exc}") from exc
