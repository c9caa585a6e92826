from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from template_copy.copier.models import PluginRoot
from tests.utils import write_templates

PluginFactory = Callable[..., Path]


@pytest.fixture()
def make_plugin(tmp_path: Path) -> PluginFactory:
    """Create a plugin directory under tmp_path with the given templates."""

    def _make(name: str, files: dict[str, str] | None = None) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        write_templates(root, files or {})
        return root

    return _make


@pytest.fixture()
def source_plugin(make_plugin: PluginFactory) -> Path:
    return make_plugin(
        "SourcePlugin",
        {
            "page/content.html.twig": "<div>Hi</div>",
            "layout/header/header.html.twig": "{% block header %}{% endblock %}",
            "base.html.twig": "{% block base %}{% endblock %}",
        },
    )


@pytest.fixture()
def target_plugin(make_plugin: PluginFactory) -> Path:
    return make_plugin("TargetPlugin")


@pytest.fixture()
def plugin_root() -> Callable[..., PluginRoot]:
    def _root(path: Path, namespace: str = "Storefront") -> PluginRoot:
        resolved = path.resolve()
        return PluginRoot(path=resolved, name=resolved.name, namespace=namespace)

    return _root
