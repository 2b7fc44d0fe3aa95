# topmark:header:start
#
#   project      : MultipartForm
#   file         : model.py
#   file_relpath : src/multipartform/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, validated snapshot of upload and encoding defaults.
    - `MutableConfig`: a mutable builder used during discovery and merging; it
      can be frozen into `Config` and thawed back for edits.

Layering (last wins): built-in defaults, then the discovered or explicit
config file, then CLI overrides.

Unset fields on a `MutableConfig` are ``None`` so that merging never confuses
"not configured" with "configured to the default".
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from multipartform.config.io import (
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_toml_dict,
)
from multipartform.config.keys import Toml
from multipartform.config.logging import get_logger
from multipartform.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_DATE_FORMAT,
    DEFAULT_FIELD_NAME,
    DEFAULT_MAX_FILE_SIZE,
    PYPROJECT_FILE_NAME,
)
from multipartform.conversion import MultipartForm
from multipartform.core.errors import EmptyFieldNameError
from multipartform.encoding.fields import ArrayEncodingStrategy
from multipartform.upload import FileUpload, check_max_size

if TYPE_CHECKING:
    from multipartform.config.io import TomlTable
    from multipartform.config.logging import MultipartFormLogger
    from multipartform.filetypes.base import FileType

# ArgsLike: generic mapping accepted by config loaders (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: MultipartFormLogger = get_logger(__name__)

CLI_OVERRIDE_STR = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        field_name (str): Default form field name for uploads.
        max_size (int): Default maximum upload size in bytes.
        array_strategy (ArrayEncodingStrategy): Naming policy for array elements.
        date_format (str): ``strftime`` pattern for dates in encoded records.
        config_files (tuple[Path | str, ...]): Sources merged into this snapshot,
            in merge order.
        diagnostics (tuple[str, ...]): Warnings collected while loading.
    """

    field_name: str
    max_size: int
    array_strategy: ArrayEncodingStrategy
    date_format: str
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[str, ...] = ()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            field_name=self.field_name,
            max_size=self.max_size,
            array_strategy=self.array_strategy,
            date_format=self.date_format,
            config_files=list(self.config_files),
            diagnostics=list(self.diagnostics),
        )

    def make_upload(
        self,
        filename: str,
        file_type: FileType,
        *,
        field_name: str | None = None,
    ) -> FileUpload:
        """Return a `FileUpload` using this config's field name and size limit."""
        return FileUpload(
            field_name=field_name if field_name is not None else self.field_name,
            filename=filename,
            file_type=file_type,
            max_size=self.max_size,
        )

    def make_form(self) -> MultipartForm:
        """Return a `MultipartForm` using this config's encoding settings."""
        return MultipartForm(self.array_strategy, date_format=self.date_format)


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        field_name (str | None): Default form field name, or None if unset.
        max_size (int | None): Default maximum upload size, or None if unset.
        array_strategy (ArrayEncodingStrategy | None): Array naming policy, or None.
        date_format (str | None): Date pattern, or None if unset.
        config_files (list[Path | str]): Sources merged so far.
        diagnostics (list[str]): Warnings collected while loading.
    """

    field_name: str | None = None
    max_size: int | None = None
    array_strategy: ArrayEncodingStrategy | None = None
    date_format: str | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this draft and freeze it into an immutable `Config`.

        Unset fields fall back to the built-in defaults.

        Raises:
            EmptyFieldNameError: If ``field_name`` is set to an empty string.
            InvalidMaxSizeError: If ``max_size`` is zero or negative.
            MaxSizeExceedsLimitError: If ``max_size`` exceeds 1 GiB.
        """
        field_name = self.field_name if self.field_name is not None else DEFAULT_FIELD_NAME
        if not field_name:
            raise EmptyFieldNameError()
        max_size = check_max_size(
            self.max_size if self.max_size is not None else DEFAULT_MAX_FILE_SIZE
        )
        return Config(
            field_name=field_name,
            max_size=max_size,
            array_strategy=self.array_strategy or ArrayEncodingStrategy.ACCUMULATE_VALUES,
            date_format=self.date_format or DEFAULT_DATE_FORMAT,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the built-in defaults."""
        return cls(
            field_name=DEFAULT_FIELD_NAME,
            max_size=DEFAULT_MAX_FILE_SIZE,
            array_strategy=ArrayEncodingStrategy.ACCUMULATE_VALUES,
            date_format=DEFAULT_DATE_FORMAT,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, where: str = "") -> MutableConfig:
        """Parse a TOML table (already unwrapped from ``[tool.multipartform]``).

        Values of the wrong type are reported in ``diagnostics`` and left unset.

        Args:
            data (TomlTable): The parsed configuration table.
            where (str): Optional source description used as a prefix in warnings.
        """
        diagnostics: list[str] = []

        upload_tbl: TomlTable = get_table_value(data, Toml.SECTION_UPLOAD)
        upload_loc = f"{where}[{Toml.SECTION_UPLOAD}]"
        encoding_tbl: TomlTable = get_table_value(data, Toml.SECTION_ENCODING)
        encoding_loc = f"{where}[{Toml.SECTION_ENCODING}]"

        return cls(
            field_name=get_string_value_or_none_checked(
                upload_tbl, Toml.KEY_FIELD_NAME, where=upload_loc, diagnostics=diagnostics
            ),
            max_size=get_int_value_or_none_checked(
                upload_tbl, Toml.KEY_MAX_SIZE, where=upload_loc, diagnostics=diagnostics
            ),
            array_strategy=get_enum_value_checked(
                encoding_tbl,
                Toml.KEY_ARRAY_STRATEGY,
                ArrayEncodingStrategy,
                where=encoding_loc,
                diagnostics=diagnostics,
            ),
            date_format=get_string_value_or_none_checked(
                encoding_tbl, Toml.KEY_DATE_FORMAT, where=encoding_loc, diagnostics=diagnostics
            ),
            diagnostics=diagnostics,
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``multipartform.toml`` and ``pyproject.toml``; for the latter
        the ``[tool.multipartform]`` table is used.

        Returns:
            MutableConfig | None: The parsed draft, or None if a ``pyproject.toml``
                has no ``[tool.multipartform]`` table.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_FILE_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, Toml.SECTION_TOOL), Toml.TOOL_NAME
            )
            if not tool_section:
                logger.debug("[tool.multipartform] section missing in %s", path)
                return None
            toml_data = tool_section

        draft = cls.from_toml_dict(toml_data, where=f"{path}:")
        draft.config_files = [path]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover(cls, start: Path) -> Path | None:
        """Return the nearest config file found by walking upward from ``start``.

        In each directory ``multipartform.toml`` takes precedence over a
        ``pyproject.toml`` that has a ``[tool.multipartform]`` table.

        Args:
            start (Path): A file or directory to start from.

        Returns:
            Path | None: The config file path, or None if none was found.
        """
        anchor = start.resolve()
        if not anchor.is_dir():
            anchor = anchor.parent
        for directory in (anchor, *anchor.parents):
            candidate = directory / CONFIG_FILE_NAME
            if candidate.is_file():
                return candidate
            pyproject = directory / PYPROJECT_FILE_NAME
            if pyproject.is_file():
                tool = get_table_value(load_toml_dict(pyproject), Toml.SECTION_TOOL)
                if Toml.TOOL_NAME in tool:
                    return pyproject
        return None

    @classmethod
    def load(cls, *, config_file: Path | None = None, start: Path | None = None) -> MutableConfig:
        """Return defaults merged with an explicit or discovered config file.

        Args:
            config_file (Path | None): Explicit config file; disables discovery.
            start (Path | None): Discovery anchor; defaults to the current directory.
        """
        draft = cls.from_defaults()
        path = config_file if config_file is not None else cls.discover(start or Path.cwd())
        if path is None:
            return draft
        loaded = cls.from_toml_file(path)
        return draft.merge_with(loaded) if loaded is not None else draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            field_name=other.field_name if other.field_name is not None else self.field_name,
            max_size=other.max_size if other.max_size is not None else self.max_size,
            array_strategy=other.array_strategy
            if other.array_strategy is not None
            else self.array_strategy,
            date_format=other.date_format if other.date_format is not None else self.date_format,
            config_files=self.config_files + other.config_files,
            diagnostics=self.diagnostics + other.diagnostics,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from an arguments mapping (CLI or API).

        Keys that are missing or ``None`` leave the draft unchanged. Recognized
        keys: ``field_name``, ``max_size``, ``array_strategy`` (enum member or
        token) and ``date_format``.

        Returns:
            MutableConfig: This draft, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        if args.get("field_name") is not None:
            self.field_name = args["field_name"]
        if args.get("max_size") is not None:
            self.max_size = int(args["max_size"])
        strategy = args.get("array_strategy")
        if isinstance(strategy, ArrayEncodingStrategy):
            self.array_strategy = strategy
        elif isinstance(strategy, str):
            parsed = ArrayEncodingStrategy.parse(strategy)
            if parsed is None:
                self.diagnostics.append(f"Ignoring unknown array strategy: {strategy!r}")
                logger.warning("Ignoring unknown array strategy: %r", strategy)
            else:
                self.array_strategy = parsed
        if args.get("date_format") is not None:
            self.date_format = args["date_format"]
        return self
