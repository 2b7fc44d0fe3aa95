# topmark:header:start
#
#   project      : MultipartForm
#   file         : test_instances_plugins.py
#   file_relpath : tests/filetypes/test_instances_plugins.py
#   license      : MIT
#   copyright    : (c) 2025 MultipartForm contributors
#
# topmark:header:end

"""Tests plugin entry-point discovery integration with the base catalog."""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

from multipartform.filetypes.base import ContentType, FileType
from multipartform.filetypes.instances import get_file_type_registry
from multipartform.registry.filetypes import FileTypeRegistry
from tests.conftest import mark_integration

if TYPE_CHECKING:
    import pytest


def _provider() -> list[object]:
    return [
        FileType(
            name="pluggy",
            content_type=ContentType("application", "x-pluggy"),
            extension="pg",
            description="plug",
        ),
        "not a file type",
    ]


def _broken_provider() -> list[FileType]:
    raise RuntimeError("plugin exploded")


def _install_entry_points(monkeypatch: pytest.MonkeyPatch, *loaders: Any) -> None:
    class _EP:
        def __init__(self, name: str, loader: Any) -> None:
            self.name = name
            self._loader = loader

        def load(self) -> Any:
            return self._loader

    eps = [_EP(f"ep{i}", loader) for i, loader in enumerate(loaders)]

    def _select(group: str) -> list[_EP]:
        return eps

    monkeypatch.setattr(
        "multipartform.filetypes.instances.entry_points",
        lambda: SimpleNamespace(select=_select),
    )
    get_file_type_registry.cache_clear()


@mark_integration
def test_plugins_are_discovered(monkeypatch: pytest.MonkeyPatch) -> None:
    """File types from entry points are merged; non-descriptors are ignored."""
    _install_entry_points(monkeypatch, _provider)
    reg = get_file_type_registry()
    assert "pluggy" in reg
    assert "png" in reg


@mark_integration
def test_broken_plugin_does_not_break_catalog(monkeypatch: pytest.MonkeyPatch) -> None:
    """A failing provider is skipped and the built-ins still load."""
    _install_entry_points(monkeypatch, _broken_provider, _provider)
    reg = get_file_type_registry()
    assert "pluggy" in reg
    assert "jpeg" in reg


@mark_integration
def test_plugin_cannot_shadow_builtin(monkeypatch: pytest.MonkeyPatch) -> None:
    """Built-ins load first, so a plugin reusing a built-in name is dropped."""
    fake_png = FileType(name="png", content_type=ContentType("x", "y"), extension="png")
    _install_entry_points(monkeypatch, [fake_png])
    assert get_file_type_registry()["png"].mime == "image/png"


@mark_integration
def test_plugin_names_are_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    """A plugin type declared in upper case is found under any spelling."""
    dicom = FileType(
        name="DICOM", content_type=ContentType("application", "dicom"), extension="dcm"
    )
    _install_entry_points(monkeypatch, [dicom])
    assert FileTypeRegistry.get("dicom") is dicom
    assert FileTypeRegistry.get("DICOM") is dicom
    assert "dicom" in FileTypeRegistry.names()
