"""Copy storefront templates from one plugin root to another.

A run is a single linear pass::

    validate (mode, roots) -> discover -> per file: plan, write unless dry run -> report

Existence of a target file is observed when the entry is planned and checked
again right before writing. Concurrent writers to the target tree are not
supported.
"""

from __future__ import annotations

import logging
from dataclasses import replace as replace_entry
from pathlib import Path

from template_copy.copier.discovery import discover_template_files
from template_copy.copier.fs import write_target_file
from template_copy.copier.models import (
    CopyAction,
    CopyMode,
    CopyPlanEntry,
    CopyReport,
    PluginRoot,
    TemplateFile,
)
from template_copy.copier.render import render_content
from template_copy.copier.roots import RootResolver, resolve_roots

logger = logging.getLogger(__name__)


def target_path_for(template: TemplateFile, target_root: PluginRoot) -> Path:
    """Swap the source root prefix of ``template`` for ``target_root``."""
    return target_root.path / template.path.relative_to(template.root.path)


def decide_action(target_exists: bool, replace: bool) -> CopyAction:
    if not target_exists:
        return CopyAction.COPIED
    return CopyAction.REPLACED if replace else CopyAction.SKIPPED


def plan_action(
    template: TemplateFile,
    target_root: PluginRoot,
    replace: bool,
    mode: CopyMode = CopyMode.EXTEND,
) -> CopyPlanEntry:
    """Build the plan entry for one template, including the content to write."""
    target_path = target_path_for(template, target_root)
    action = decide_action(target_path.exists(), replace)
    content = render_content(mode, template, template.root) if action.writes else None
    return CopyPlanEntry(
        template=template,
        target_path=target_path,
        action=action,
        content=content,
    )


def apply_entry(entry: CopyPlanEntry, replace: bool) -> bool:
    """Write a planned entry. Returns False when the write was skipped."""
    if not entry.action.writes or entry.content is None:
        return False
    if entry.target_path.exists() and not replace:
        logger.info("Target appeared since planning, skipping %s", entry.target_path)
        return False
    write_target_file(entry.target_path, entry.content)
    return True


def validate_run(
    source: str,
    target: str,
    mode: "str | CopyMode",
    resolver: RootResolver,
) -> tuple[CopyMode, PluginRoot, PluginRoot]:
    """Check roots and mode before anything is discovered or written.

    Raises:
        NotFoundError, SameRootError, InvalidModeError
    """
    source_root, target_root = resolve_roots(source, target, resolver)
    copy_mode = CopyMode.parse(mode)
    return copy_mode, source_root, target_root


def copy_templates(
    source_root: PluginRoot,
    target_root: PluginRoot,
    mode: CopyMode,
    *,
    replace: bool = False,
    dry_run: bool = False,
) -> CopyReport:
    """Walk ``source_root`` and copy each template into ``target_root``.

    Raises:
        DirectoryCreateError, TemplateIOError: The run is aborted on the first
            failure; files written before it are left in place.
    """
    report = CopyReport(source=source_root, target=target_root, mode=mode, dry_run=dry_run)
    for template in discover_template_files(source_root):
        entry = plan_action(template, target_root, replace, mode)
        logger.debug("%s: %s", entry.relative_path, entry.action.value)
        if not dry_run and entry.action.writes and not apply_entry(entry, replace):
            entry = replace_entry(entry, action=CopyAction.SKIPPED, content=None)
        report.entries.append(entry)
    return report


def run_copy(
    source: str,
    target: str,
    mode: "str | CopyMode",
    *,
    resolver: RootResolver,
    replace: bool = False,
    dry_run: bool = False,
) -> CopyReport:
    """Copy every storefront template from ``source`` to ``target``.

    Args:
        source: Identifier of the source plugin (path or registry name)
        target: Identifier of the target plugin
        mode: ``extend`` or ``override``
        resolver: Strategy used to turn identifiers into plugin roots
        replace: Overwrite target files that already exist
        dry_run: Compute the report without touching the filesystem

    Returns:
        CopyReport with one entry per discovered template, in discovery order.
    """
    copy_mode, source_root, target_root = validate_run(source, target, mode, resolver)
    return copy_templates(source_root, target_root, copy_mode, replace=replace, dry_run=dry_run)
