# topmark:header:start
#
#   project      : MultipartForm
#   file         : filetypes.py
#   file_relpath : src/multipartform/registry/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Public file type registry with process-local overlays.

Notes:
    * Read methods compose the **effective** registry (base built-ins + entry
      points + local overlays - removals) and return read-only views.
    * `register()` / `unregister()` perform **overlay-only** changes. They do not
      mutate the base catalog built by [`multipartform.filetypes.instances`][].
      Overlays are process-local and guarded by an `RLock`.
    * Descriptors themselves are immutable, so values returned by `get()` can
      be used concurrently without coordination.

Typical usage:
    ```python
    from multipartform.registry import FileTypeRegistry

    png = FileTypeRegistry.require("png")
    png.validate(data)

    FileTypeRegistry.register(my_xml_type)
    try:
        ...
    finally:
        FileTypeRegistry.unregister(my_xml_type.name)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

from multipartform.config.logging import get_logger
from multipartform.core.errors import UnknownFileTypeError

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from multipartform.config.logging import MultipartFormLogger
    from multipartform.filetypes.base import FileType

logger: MultipartFormLogger = get_logger(__name__)


@dataclass(frozen=True)
class FileTypeMeta:
    """Stable, serializable metadata about a registered FileType."""

    name: str
    content_type: str
    extension: str
    description: str = ""
    signature: bool = False

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict."""
        return {
            "name": self.name,
            "content_type": self.content_type,
            "extension": self.extension,
            "description": self.description,
            "signature": self.signature,
        }


class FileTypeRegistry:
    """Read-oriented view of the file type catalog with optional mutation hooks.

    Notes:
        - Mutation hooks are intended for applications registering custom formats
          at start-up and for test scaffolding.
    """

    _lock: ClassVar[RLock] = RLock()

    # Local overlays; applied on top of the base (built-ins + plugins).
    _overrides: ClassVar[dict[str, FileType]] = {}
    _removals: ClassVar[set[str]] = set()

    @classmethod
    def _compose(cls) -> dict[str, FileType]:
        """Compose base registry with local overlays/removals."""
        from multipartform.filetypes.instances import get_file_type_registry as _get_ft

        base: dict[str, FileType] = dict(_get_ft())
        base.update(cls._overrides)
        for name in cls._removals:
            base.pop(name, None)
        return base

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return all registered file type names (sorted)."""
        with cls._lock:
            return tuple(sorted(cls._compose().keys()))

    @classmethod
    def get(cls, name: str) -> FileType | None:
        """Return a file type by name, or None if it is not registered.

        Args:
            name (str): Registered file type name (case-insensitive).

        Returns:
            FileType | None: The `FileType` object if found, else None.
        """
        with cls._lock:
            return cls._compose().get(name.strip().lower())

    @classmethod
    def require(cls, name: str) -> FileType:
        """Return a file type by name.

        Raises:
            UnknownFileTypeError: If no file type is registered under ``name``.
        """
        ft = cls.get(name)
        if ft is None:
            raise UnknownFileTypeError(name)
        return ft

    @classmethod
    def for_extension(cls, extension: str) -> tuple[FileType, ...]:
        """Return the file types whose canonical extension is ``extension``.

        A leading dot is ignored and the comparison is case-insensitive.
        """
        ext = extension.lower().lstrip(".")
        with cls._lock:
            return tuple(ft for ft in cls._compose().values() if ft.extension.lower() == ext)

    @classmethod
    def for_content_type(cls, content_type: str) -> tuple[FileType, ...]:
        """Return the file types whose ``type/subtype`` equals ``content_type``."""
        essence = content_type.split(";", 1)[0].strip().lower()
        with cls._lock:
            return tuple(
                ft for ft in cls._compose().values() if ft.content_type.essence == essence
            )

    @classmethod
    def as_mapping(cls) -> Mapping[str, FileType]:
        """Return a read-only mapping of file types.

        Notes:
            The returned mapping is a `MappingProxyType` over a snapshot; later
            registrations are not reflected in it.
        """
        with cls._lock:
            return MappingProxyType(cls._compose())

    @classmethod
    def iter_meta(cls) -> Iterator[FileTypeMeta]:
        """Iterate over stable metadata for registered file types, sorted by name."""
        with cls._lock:
            snapshot = cls._compose()
        for name in sorted(snapshot):
            ft = snapshot[name]
            yield FileTypeMeta(
                name=name,
                content_type=ft.mime,
                extension=ft.extension,
                description=ft.description,
                signature=ft.signature,
            )

    @classmethod
    def register(cls, ft_obj: FileType, *, replace: bool = False) -> None:
        """Register a new file type.

        Args:
            ft_obj (FileType): A `FileType` with a unique, non-empty `.name`.
            replace (bool): Allow shadowing an existing entry of the same name.

        Raises:
            ValueError: If `.name` is already registered and ``replace`` is False.

        Notes:
            This mutates process-global overlay state. Prefer temporary usage in
            tests with try/finally to ensure cleanup.
        """
        with cls._lock:
            name: str = ft_obj.name.lower()
            if not replace and name in cls._compose():
                raise ValueError(f"Duplicate FileType name: {name}")
            cls._removals.discard(name)
            cls._overrides[name] = ft_obj
            logger.debug("Registered file type overlay: %s (%s)", name, ft_obj.mime)

    @classmethod
    def unregister(cls, name: str) -> bool:
        """Unregister a file type by name.

        Returns:
            bool: `True` if the entry existed and was removed, else `False`.
        """
        name = name.lower()
        with cls._lock:
            existed = False
            if name in cls._overrides:
                existed = True
                cls._overrides.pop(name, None)
            # If present only in base, we still support hiding it
            if name in cls._compose():
                existed = True
                cls._removals.add(name)
            if existed:
                logger.debug("Unregistered file type: %s", name)
            return existed

    @classmethod
    def reset(cls) -> None:
        """Drop all overlays and removals, restoring the base catalog."""
        with cls._lock:
            cls._overrides.clear()
            cls._removals.clear()
