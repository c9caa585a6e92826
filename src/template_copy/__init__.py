"""Copy storefront template files from one plugin to another.

Usage:
    template-copy <source> <target> [--mode=extend|override] [--replace] [--dry-run]
"""

from template_copy.copier import CopyAction, CopyMode, CopyReport, run_copy

__version__ = "0.1.0"

__all__ = ["CopyAction", "CopyMode", "CopyReport", "run_copy", "__version__"]
