# topmark:header:start
#
#   project      : MultipartForm
#   file         : errors.py
#   file_relpath : src/multipartform/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Exceptions for the MultipartForm CLI.

Raise these from commands to abort with a standardized message and exit code.
Library errors (`MultipartFormError` subclasses) are translated at the command
boundary; their message becomes the CLI error text.
"""

from __future__ import annotations

from typing import IO, Any

import click

from multipartform.cli.exit_codes import ExitCode


class MultipartFormCliError(click.ClickException):
    """Base class for all MultipartForm CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None)
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(self.format_message(), fg="bright_red"))
            return
        super().show(file)


class CliUsageError(MultipartFormCliError):
    """Error for command-line invocation errors (invalid flags/args, unknown type)."""

    exit_code = ExitCode.USAGE_ERROR


class CliDataError(MultipartFormCliError):
    """Error for rejected input (validation or encoding failure)."""

    exit_code = ExitCode.DATA_ERROR


class CliFileNotFoundError(MultipartFormCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class CliIOError(MultipartFormCliError):
    """Error for I/O errors reading input."""

    exit_code = ExitCode.IO_ERROR


class CliConfigError(MultipartFormCliError):
    """Error for configuration errors (invalid values after merging)."""

    exit_code = ExitCode.CONFIG_ERROR
