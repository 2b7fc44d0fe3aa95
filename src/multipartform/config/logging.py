# topmark:header:start
#
#   project      : MultipartForm
#   file         : logging.py
#   file_relpath : src/multipartform/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Logging for MultipartForm: a TRACE level and colored CLI output.

Library modules obtain their logger with `get_logger(__name__)` and log
diagnostics only (catalog loading, plugin discovery, accepted uploads). Errors
are raised to the caller, never logged in their place.

Nothing is printed unless an application configures logging. The CLI calls
`setup_logging`, which attaches a ``yachalk``-colored handler to the
``multipartform`` logger hierarchy (not to the root logger, which belongs to the
host application).

Levels, lowest first: ``TRACE`` (per-upload acceptance lines), ``DEBUG``
(catalog and config loading), ``INFO``, ``WARNING`` (ignored config values,
skipped plugins), ``ERROR``, ``CRITICAL``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

ENV_LOG_LEVEL: Final[str] = "MULTIPARTFORM_LOG_LEVEL"

PACKAGE_LOGGER_NAME: Final[str] = "multipartform"

DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING


class MultipartFormLogger(logging.Logger):
    """Logger class adding `trace()` below `debug()`."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(MultipartFormLogger)

# Quiet by default when used as a library
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# (lowest level, style); the first matching row wins
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright.bold),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Write to the *current* ``sys.stderr``.

    Click's test runner and some shells swap ``sys.stderr`` after logging has
    been configured; binding the stream at emit time keeps records going to the
    live stream.
    """

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    def emit(self, record: logging.LogRecord) -> None:
        self.stream = sys.stderr
        super().emit(record)


def parse_log_level(value: str) -> int | None:
    """Return the numeric level for a name (``"debug"``, ``"TRACE"``) or number, else None."""
    text = value.strip().upper()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    if text == "TRACE":
        return TRACE_LEVEL
    level = logging.getLevelName(text)
    return level if isinstance(level, int) else None


def resolve_env_log_level() -> int | None:
    """Return the level requested by ``MULTIPARTFORM_LOG_LEVEL``, or None if unset or invalid."""
    return parse_log_level(os.environ.get(ENV_LOG_LEVEL, ""))


def setup_logging(level: int | None = None) -> None:
    """Attach a colored stderr handler to the ``multipartform`` logger.

    Calling it again replaces the previous handler, so the level can be changed
    per CLI invocation.

    Args:
        level (int | None): Level to apply. When None, ``MULTIPARTFORM_LOG_LEVEL``
            is consulted, then WARNING.
    """
    if level is None:
        level = resolve_env_log_level() or DEFAULT_LOG_LEVEL

    pkg_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    pkg_logger.setLevel(level)
    for handler in pkg_logger.handlers[:]:
        if isinstance(handler, _StderrHandler):
            pkg_logger.removeHandler(handler)

    handler = _StderrHandler()
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False


def get_logger(name: str) -> MultipartFormLogger:
    """Return the `MultipartFormLogger` for ``name`` (normally ``__name__``)."""
    return cast("MultipartFormLogger", logging.getLogger(name))
