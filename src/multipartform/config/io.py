# topmark:header:start
#
#   project      : MultipartForm
#   file         : io.py
#   file_relpath : src/multipartform/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

Parsing is done with `tomlkit` and returned as plain `dict` structures.

The *checked* getters validate the expected shape of a value. A value of the
wrong type is not fatal: the getter logs a warning, appends the same message to
a ``diagnostics`` list and returns ``None`` so the caller keeps its default.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from multipartform.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from multipartform.config.logging import MultipartFormLogger

TomlTable = dict[str, Any]

E = TypeVar("E", bound=Enum)

logger: MultipartFormLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``multipartform.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` or an empty dict if missing or not a table."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for key %s, got %r; ignoring", key, value)
    return {}


def _reject(loc: str, expected: str, value: Any, diagnostics: list[str]) -> None:
    message: Final[str] = f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}"
    logger.warning("%s", message)
    diagnostics.append(message)


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, str):
        return value
    _reject(f"{where}.{key}", "string", value, diagnostics)
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        ``bool`` is rejected (``bool`` is a subclass of ``int``).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    _reject(f"{where}.{key}", "int", value, diagnostics)
    return None


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: list[str],
) -> E | None:
    """Parse an enum value from TOML.

    Expected input is a `str` matching one of the Enum values (case-insensitive).

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown enum value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        _reject(loc, "string enum value", raw, diagnostics)
        return None

    for member in enum_cls:
        if str(member.value).lower() == raw.strip().lower():
            return member

    allowed: str = ", ".join(str(e.value) for e in enum_cls)
    message: Final[str] = f"Invalid value for {loc}: {raw!r} (allowed: {allowed})"
    logger.warning("%s", message)
    diagnostics.append(message)
    return None
