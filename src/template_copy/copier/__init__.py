"""Core of the storefront template copier."""

from .discovery import TemplateDiscovery, discover_template_files
from .engine import (
    apply_entry,
    copy_templates,
    decide_action,
    plan_action,
    run_copy,
    target_path_for,
    validate_run,
)
from .errors import (
    DirectoryCreateError,
    InvalidModeError,
    NotFoundError,
    PluginNotFoundError,
    RegistryError,
    SameRootError,
    TemplateCopyError,
    TemplateIOError,
)
from .fs import ensure_directory, write_target_file
from .models import (
    CopyAction,
    CopyMode,
    CopyPlanEntry,
    CopyReport,
    PluginRoot,
    TemplateFile,
)
from .registry import PluginRegistry, RegisteredPlugin
from .render import render_extend_content, render_override_content
from .roots import PathRootResolver, RegistryRootResolver, RootResolver, resolve_roots

__all__ = [
    "CopyAction",
    "CopyMode",
    "CopyPlanEntry",
    "CopyReport",
    "DirectoryCreateError",
    "InvalidModeError",
    "NotFoundError",
    "PathRootResolver",
    "PluginNotFoundError",
    "PluginRegistry",
    "PluginRoot",
    "RegisteredPlugin",
    "RegistryError",
    "RegistryRootResolver",
    "RootResolver",
    "SameRootError",
    "TemplateCopyError",
    "TemplateDiscovery",
    "TemplateFile",
    "TemplateIOError",
    "apply_entry",
    "copy_templates",
    "decide_action",
    "discover_template_files",
    "ensure_directory",
    "plan_action",
    "render_extend_content",
    "render_override_content",
    "resolve_roots",
    "run_copy",
    "target_path_for",
    "validate_run",
    "write_target_file",
]
