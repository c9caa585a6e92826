"""Plugin registry stored in a YAML file.

The registry maps plugin logical names to their installation roots::

    plugins:
      SwagExamplePlugin:
        path: custom/plugins/SwagExamplePlugin
      MyTheme: custom/plugins/MyTheme

Relative paths are resolved against the directory holding the registry file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from template_copy.copier.errors import PluginNotFoundError, RegistryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisteredPlugin:
    name: str
    path: Path


class PluginRegistry:
    """Lookup of plugin names to installation roots."""

    def __init__(self, plugins: dict[str, Path]):
        self._plugins = dict(plugins)

    @classmethod
    def from_dict(cls, data: object, base_dir: Path) -> "PluginRegistry":
        if data is None:
            return cls({})
        if not isinstance(data, dict):
            raise RegistryError("Plugin registry must be a mapping")

        section = data.get("plugins", {})
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise RegistryError("'plugins' must be a mapping of plugin names")

        plugins: dict[str, Path] = {}
        for name, entry in section.items():
            if isinstance(entry, dict):
                raw_path = entry.get("path")
            else:
                raw_path = entry
            if not isinstance(raw_path, str) or not raw_path.strip():
                raise RegistryError(f'Plugin "{name}" has no path')
            path = Path(raw_path.strip()).expanduser()
            if not path.is_absolute():
                path = base_dir / path
            plugins[str(name)] = path
        return cls(plugins)

    @classmethod
    def load(cls, registry_file: Path) -> "PluginRegistry":
        """Load the registry from ``registry_file``."""
        if not registry_file.is_file():
            raise RegistryError(f'Plugin registry "{registry_file}" does not exist')

        yaml = YAML(typ="safe")
        try:
            with registry_file.open("r", encoding="utf-8") as handle:
                payload = yaml.load(handle)
        except (OSError, YAMLError) as exc:
            raise RegistryError(f"Failed to parse {registry_file}: {exc}") from exc

        registry = cls.from_dict(payload, registry_file.resolve().parent)
        logger.debug("Loaded %d plugin(s) from %s", len(registry), registry_file)
        return registry

    def get(self, name: str) -> RegisteredPlugin:
        try:
            return RegisteredPlugin(name=name, path=self._plugins[name])
        except KeyError:
            raise PluginNotFoundError(name) from None

    def names(self) -> list[str]:
        return sorted(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)
