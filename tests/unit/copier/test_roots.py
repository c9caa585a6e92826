"""Tests for template_copy.copier.roots — identifier to plugin root resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from template_copy.copier.errors import NotFoundError, PluginNotFoundError, SameRootError
from template_copy.copier.registry import PluginRegistry
from template_copy.copier.roots import PathRootResolver, RegistryRootResolver, resolve_roots


class TestPathRootResolver:
    def test_resolves_directory(self, source_plugin: Path) -> None:
        root = PathRootResolver().resolve(str(source_plugin))

        assert root.path == source_plugin.resolve()
        assert root.name == "SourcePlugin"
        assert root.namespace == "Storefront"

    def test_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            PathRootResolver().resolve(str(tmp_path / "nope"))
        assert exc_info.value.identifier == str(tmp_path / "nope")

    def test_file_path_raises(self, tmp_path: Path) -> None:
        file_path = tmp_path / "plugin.zip"
        file_path.write_text("x")

        with pytest.raises(NotFoundError):
            PathRootResolver().resolve(str(file_path))


class TestRegistryRootResolver:
    def test_resolves_plugin_name(self, source_plugin: Path) -> None:
        registry = PluginRegistry({"SwagSource": source_plugin})

        root = RegistryRootResolver(registry).resolve("SwagSource")

        assert root.path == source_plugin.resolve()
        assert root.name == "SwagSource"
        assert root.namespace == "SwagSource"

    def test_unknown_plugin_raises(self) -> None:
        resolver = RegistryRootResolver(PluginRegistry({}))

        with pytest.raises(PluginNotFoundError) as exc_info:
            resolver.resolve("Missing")
        assert isinstance(exc_info.value, NotFoundError)
        assert "Missing" in str(exc_info.value)

    def test_registered_path_must_exist(self, tmp_path: Path) -> None:
        resolver = RegistryRootResolver(PluginRegistry({"Gone": tmp_path / "gone"}))

        with pytest.raises(NotFoundError):
            resolver.resolve("Gone")


class TestResolveRoots:
    def test_returns_both_roots(self, source_plugin: Path, target_plugin: Path) -> None:
        source, target = resolve_roots(str(source_plugin), str(target_plugin), PathRootResolver())

        assert source.path == source_plugin.resolve()
        assert target.path == target_plugin.resolve()

    def test_same_path_rejected(self, source_plugin: Path) -> None:
        with pytest.raises(SameRootError):
            resolve_roots(str(source_plugin), str(source_plugin), PathRootResolver())

    def test_same_path_after_canonicalisation_rejected(self, source_plugin: Path) -> None:
        roundabout = source_plugin / ".." / source_plugin.name

        with pytest.raises(SameRootError):
            resolve_roots(str(source_plugin), str(roundabout), PathRootResolver())

    def test_two_names_for_one_directory_rejected(self, source_plugin: Path) -> None:
        registry = PluginRegistry({"A": source_plugin, "B": source_plugin})

        with pytest.raises(SameRootError):
            resolve_roots("A", "B", RegistryRootResolver(registry))

    def test_source_checked_first(self, tmp_path: Path) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            resolve_roots(str(tmp_path / "src"), str(tmp_path / "dst"), PathRootResolver())
        assert exc_info.value.identifier == str(tmp_path / "src")
