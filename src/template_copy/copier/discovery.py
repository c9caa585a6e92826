"""Lazy discovery of storefront templates beneath a plugin root."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from template_copy.copier.errors import TemplateIOError
from template_copy.copier.models import TEMPLATE_SUFFIX, PluginRoot, TemplateFile


def discover_template_files(root: PluginRoot) -> Iterator[TemplateFile]:
    """Yield every ``*.html.twig`` file under the storefront subtree.

    Files are produced in lexical order of their relative path, one directory
    at a time, so memory stays bounded by the widest directory rather than
    the whole tree. Symlinked directories are not descended into. A missing
    subtree yields nothing.

    Raises:
        TemplateIOError: If a directory in the subtree cannot be listed.
    """
    base = root.storefront_dir
    if not base.is_dir():
        return
    yield from _walk(root, base)


def _walk(root: PluginRoot, directory: Path) -> Iterator[TemplateFile]:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        raise TemplateIOError(directory, str(exc)) from exc
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(root, Path(entry.path))
        elif entry.is_file() and entry.name.endswith(TEMPLATE_SUFFIX):
            yield TemplateFile(root=root, path=Path(entry.path))


class TemplateDiscovery:
    """Restartable view over :func:`discover_template_files`."""

    def __init__(self, root: PluginRoot):
        self.root = root

    def __iter__(self) -> Iterator[TemplateFile]:
        return discover_template_files(self.root)
