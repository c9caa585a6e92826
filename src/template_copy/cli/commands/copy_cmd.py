"""The ``template-copy`` command.

Usage:
    template-copy SOURCE TARGET                     # extend stubs for new files
    template-copy SOURCE TARGET --mode override     # full copies with provenance
    template-copy SOURCE TARGET --replace           # overwrite existing files
    template-copy SOURCE TARGET --dry-run           # preview only
    template-copy NAME NAME --registry plugins.yaml # resolve plugin names
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from template_copy.config import configure_logging, load_settings
from template_copy.copier import (
    CopyAction,
    CopyMode,
    CopyReport,
    PathRootResolver,
    PluginRegistry,
    RegistryRootResolver,
    RootResolver,
    TemplateCopyError,
    copy_templates,
    validate_run,
)
from template_copy.copier.render import COMMAND_NAME

COMMAND_DESCRIPTION = "Copy template files from one plugin to another"

console = Console()
err_console = Console(stderr=True)

_ACTION_STYLES = {
    CopyAction.COPIED: "green",
    CopyAction.SKIPPED: "dim",
    CopyAction.REPLACED: "yellow",
}

_MODE_HELP = (
    f"Mode: '{CopyMode.EXTEND.value}' for extending files (using 'sw_extends'), "
    f"'{CopyMode.OVERRIDE.value}' for overriding files (copy full file contents)"
)


def display_path(path: Path, working_dir: Path) -> str:
    """Show ``path`` relative to ``working_dir`` when it lives below it."""
    try:
        return str(path.relative_to(working_dir))
    except ValueError:
        return str(path)


def build_report_table(report: CopyReport, working_dir: Path) -> Table:
    table = Table(show_lines=False)
    table.add_column("Source")
    table.add_column("Target")
    table.add_column("Action")
    for entry in report.entries:
        style = _ACTION_STYLES[entry.action]
        table.add_row(
            display_path(entry.source_path, working_dir),
            display_path(entry.target_path, working_dir),
            f"[{style}]{entry.action.value}[/{style}]",
        )
    return table


def _summary(report: CopyReport) -> str:
    counts = report.counts()
    parts = [f"{counts[action]} {action.value.lower()}" for action in CopyAction]
    prefix = "Would process" if report.dry_run else "Processed"
    return f"{prefix} {len(report)} template file(s): " + ", ".join(parts)


def _build_resolver(registry_file: Path | None) -> RootResolver:
    if registry_file is None:
        return PathRootResolver()
    return RegistryRootResolver(PluginRegistry.load(registry_file))


def copy(
    source: str = typer.Argument(..., help="Source plugin (path, or name with --registry)"),
    target: str = typer.Argument(..., help="Target plugin (path, or name with --registry)"),
    mode: str = typer.Option(CopyMode.EXTEND.value, "--mode", help=_MODE_HELP),
    replace: bool = typer.Option(False, "--replace", help="Replace existing files"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Dry run, do not touch files"),
    registry: Optional[Path] = typer.Option(
        None,
        "--registry",
        help="Plugin registry YAML; SOURCE and TARGET become plugin names",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-file decisions"),
) -> None:
    """Copy template files from one plugin to another."""
    settings = load_settings()
    configure_logging(logging.DEBUG if verbose else settings.log_level, err_console)

    console.rule(f"[bold]{COMMAND_DESCRIPTION} ({COMMAND_NAME})[/bold]")

    try:
        resolver = _build_resolver(registry or settings.registry_file)
        copy_mode, source_root, target_root = validate_run(source, target, mode, resolver)

        if dry_run:
            console.print("[yellow]Warning:[/yellow] Dry run, no files will be touched")

        report = copy_templates(
            source_root,
            target_root,
            copy_mode,
            replace=replace,
            dry_run=dry_run,
        )
    except TemplateCopyError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    console.print(build_report_table(report, Path.cwd()))
    console.print(_summary(report))
