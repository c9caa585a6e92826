"""Shared helpers for template-copy tests."""

from __future__ import annotations

from pathlib import Path

from template_copy.copier.models import STOREFRONT_SUBPATH


def write_templates(root: Path, files: dict[str, str]) -> None:
    """Write ``files`` (storefront-relative path -> content) beneath ``root``."""
    base = root / STOREFRONT_SUBPATH
    for rel, content in files.items():
        path = base / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def snapshot_tree(root: Path) -> dict[str, bytes]:
    """Map of relative file path -> bytes for every file under ``root``."""
    if not root.exists():
        return {}
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }
