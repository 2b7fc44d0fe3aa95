# topmark:header:start
#
#   project      : MultipartForm
#   file         : instances.py
#   file_relpath : src/multipartform/filetypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Base file type catalog: built-ins plus plugin-provided descriptors.

The catalog is built on first access and cached. Built-ins come first, then
descriptors from the ``multipartform.filetypes`` entry point group, e.g.:

```toml
[project.entry-points."multipartform.filetypes"]
dicom = "my_pkg.formats:FILETYPES"        # a list of FileType
heif = "my_pkg.formats:provide_filetypes"  # or a callable returning one
```

The first descriptor seen under a name wins, so a plugin cannot replace a
built-in. Process-local replacement goes through
[`FileTypeRegistry`][multipartform.registry.filetypes.FileTypeRegistry].

A plugin that fails to import, raises, or returns something other than an
iterable of descriptors is logged and skipped; it never prevents the catalog
from loading.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from importlib import import_module
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Any, Final

from multipartform.config.logging import get_logger
from multipartform.constants import FILETYPES_ENTRYPOINT_GROUP
from multipartform.filetypes.base import FileType

if TYPE_CHECKING:
    from importlib.metadata import EntryPoint

    from multipartform.config.logging import MultipartFormLogger

logger: MultipartFormLogger = get_logger(__name__)

BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "multipartform.filetypes.builtins.images",
    "multipartform.filetypes.builtins.documents",
    "multipartform.filetypes.builtins.media",
    "multipartform.filetypes.builtins.data",
    "multipartform.filetypes.builtins.code",
)


def _descriptors(source: str, provided: Any) -> list[FileType]:
    """Return the FileType items of ``provided``, warning about anything else."""
    if not isinstance(provided, Iterable) or isinstance(provided, (str, bytes)):
        logger.warning(
            "%s did not provide an iterable of FileType objects: %r", source, provided
        )
        return []
    accepted: list[FileType] = []
    for item in provided:  # pyright: ignore[reportUnknownVariableType]
        if isinstance(item, FileType):
            accepted.append(item)
        else:
            logger.warning("%s provided a non-FileType entry: %r", source, item)
    return accepted


def _load_builtins() -> list[FileType]:
    found: list[FileType] = []
    for modname in BUILTIN_MODULES:
        found.extend(_descriptors(modname, getattr(import_module(modname), "FILETYPES", None)))
    return found


def _load_plugin(ep: EntryPoint) -> list[FileType]:
    try:
        provider: Any = ep.load()
        provided: Any = provider() if callable(provider) else provider
    except Exception:
        logger.exception("Failed loading file types from entry point %s", ep.name)
        return []
    return _descriptors(f"Entry point {ep.name}", provided)


@lru_cache(maxsize=1)
def get_file_type_registry() -> dict[str, FileType]:
    """Return the cached base catalog keyed by lowercase file type name.

    The mapping must be treated as read-only; use
    [`FileTypeRegistry`][multipartform.registry.filetypes.FileTypeRegistry] for
    overlays. Call ``get_file_type_registry.cache_clear()`` to rebuild it.
    """
    catalog: dict[str, FileType] = {}
    sources: list[tuple[str, list[FileType]]] = [("built-in", _load_builtins())]
    for ep in entry_points().select(group=FILETYPES_ENTRYPOINT_GROUP):
        sources.append((f"plugin {ep.name}", _load_plugin(ep)))

    for origin, descriptors in sources:
        for ft in descriptors:
            key = ft.name.lower()
            if key in catalog:
                logger.warning(
                    "Ignoring %s file type %r: name already registered", origin, ft.name
                )
                continue
            catalog[key] = ft
    logger.debug("Loaded %d file types", len(catalog))
    return catalog
