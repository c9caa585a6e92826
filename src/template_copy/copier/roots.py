"""Resolution of source/target identifiers to plugin roots.

Two strategies are available:

- :class:`PathRootResolver` treats identifiers as filesystem paths.
- :class:`RegistryRootResolver` treats identifiers as plugin names and looks
  them up in a :class:`~template_copy.copier.registry.PluginRegistry`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from template_copy.copier.errors import NotFoundError, SameRootError
from template_copy.copier.models import STOREFRONT_NAMESPACE, PluginRoot
from template_copy.copier.registry import PluginRegistry

logger = logging.getLogger(__name__)


class RootResolver(Protocol):
    """Resolve an identifier to a plugin root, raising NotFoundError otherwise."""

    def resolve(self, identifier: str) -> PluginRoot: ...


class PathRootResolver:
    """Identifiers are directory paths; templates extend the storefront bundle."""

    def resolve(self, identifier: str) -> PluginRoot:
        path = Path(identifier).expanduser()
        if not path.is_dir():
            raise NotFoundError(identifier, f'Plugin path "{identifier}" is not a directory')
        path = path.resolve()
        return PluginRoot(path=path, name=path.name, namespace=STOREFRONT_NAMESPACE)


class RegistryRootResolver:
    """Identifiers are plugin names; templates extend the plugin's own namespace."""

    def __init__(self, registry: PluginRegistry):
        self.registry = registry

    def resolve(self, identifier: str) -> PluginRoot:
        plugin = self.registry.get(identifier)
        if not plugin.path.is_dir():
            raise NotFoundError(
                identifier,
                f'Plugin "{identifier}" path "{plugin.path}" is not a directory',
            )
        return PluginRoot(path=plugin.path.resolve(), name=plugin.name, namespace=plugin.name)


def resolve_roots(
    source: str,
    target: str,
    resolver: RootResolver,
) -> tuple[PluginRoot, PluginRoot]:
    """Resolve both identifiers and reject a target that is the source itself."""
    source_root = resolver.resolve(source)
    target_root = resolver.resolve(target)
    if source_root.path == target_root.path:
        raise SameRootError(source_root.path)
    logger.debug("Resolved roots: %s -> %s", source_root.path, target_root.path)
    return source_root, target_root
