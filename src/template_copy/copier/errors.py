"""Exception hierarchy for template copy runs.

Every error is terminal for the current run. Validation errors
(:class:`NotFoundError`, :class:`SameRootError`, :class:`InvalidModeError`)
are raised before any discovery or write happens; I/O errors
(:class:`DirectoryCreateError`, :class:`TemplateIOError`) abort a run that
is already walking the source tree.
"""

from __future__ import annotations

from pathlib import Path


class TemplateCopyError(RuntimeError):
    """Base exception for template copy errors."""
    pass


class NotFoundError(TemplateCopyError):
    """An identifier does not resolve to a usable plugin root."""

    def __init__(self, identifier: str, message: str | None = None):
        self.identifier = identifier
        super().__init__(message or f'Plugin root "{identifier}" is not a directory')


class PluginNotFoundError(NotFoundError):
    """A plugin name is not known to the registry."""

    def __init__(self, name: str):
        super().__init__(name, f'Plugin "{name}" not found')


class SameRootError(TemplateCopyError):
    """Source and target resolve to the same directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__("Source and target are the same")


class InvalidModeError(TemplateCopyError):
    """Mode option is outside the accepted set."""

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f'Invalid mode "{mode}"')


class DirectoryCreateError(TemplateCopyError):
    """A target directory could not be created."""

    def __init__(self, directory: Path):
        self.directory = directory
        super().__init__(f'Directory "{directory}" was not created')


class TemplateIOError(TemplateCopyError):
    """Reading a source template or writing a target file failed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'Failed to access "{path}": {reason}')


class RegistryError(TemplateCopyError):
    """The plugin registry file is missing or malformed."""
    pass
