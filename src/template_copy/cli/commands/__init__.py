"""CLI command modules for template-copy."""

from .copy_cmd import copy

__all__ = ["copy"]
