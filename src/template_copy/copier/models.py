"""Data types shared by the template copier."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath

from template_copy.copier.errors import InvalidModeError

# Fixed location of storefront templates inside a plugin root
STOREFRONT_SUBPATH = PurePosixPath("src/Resources/views/storefront")

TEMPLATE_SUFFIX = ".html.twig"

# Twig namespace of the storefront bundle
STOREFRONT_NAMESPACE = "Storefront"


class CopyMode(Enum):
    """Content-generation strategy, fixed for a whole run."""

    EXTEND = "extend"  # thin sw_extends stub
    OVERRIDE = "override"  # full copy with provenance comments

    @classmethod
    def parse(cls, value: "str | CopyMode") -> "CopyMode":
        if isinstance(value, cls):
            return value
        for mode in cls:
            if mode.value == value:
                return mode
        raise InvalidModeError(str(value))

    @classmethod
    def choices(cls) -> tuple[str, ...]:
        return tuple(mode.value for mode in cls)


class CopyAction(Enum):
    COPIED = "Copied"
    SKIPPED = "Skipped"
    REPLACED = "Replaced"

    @property
    def writes(self) -> bool:
        return self is not CopyAction.SKIPPED


@dataclass(frozen=True)
class PluginRoot:
    """A resolved plugin installation root.

    ``name`` is the plugin's logical name (or directory name when the root was
    given as a path); ``namespace`` is the Twig namespace used in generated
    ``sw_extends`` directives.
    """

    path: Path
    name: str
    namespace: str = STOREFRONT_NAMESPACE

    @property
    def storefront_dir(self) -> Path:
        return self.path / STOREFRONT_SUBPATH


@dataclass(frozen=True)
class TemplateFile:
    """A storefront template discovered beneath a plugin root."""

    root: PluginRoot
    path: Path

    @property
    def relative_path(self) -> str:
        """Path relative to the storefront subtree, with POSIX separators."""
        return self.path.relative_to(self.root.storefront_dir).as_posix()


@dataclass(frozen=True)
class CopyPlanEntry:
    template: TemplateFile
    target_path: Path
    action: CopyAction
    content: str | None = None  # None when nothing is (or would be) written

    @property
    def relative_path(self) -> str:
        return self.template.relative_path

    @property
    def source_path(self) -> Path:
        return self.template.path


@dataclass
class CopyReport:
    """Entries of one run, in discovery order."""

    source: PluginRoot
    target: PluginRoot
    mode: CopyMode
    dry_run: bool = False
    entries: list[CopyPlanEntry] = field(default_factory=list)

    def counts(self) -> dict[CopyAction, int]:
        tally = Counter(entry.action for entry in self.entries)
        return {action: tally.get(action, 0) for action in CopyAction}

    def __len__(self) -> int:
        return len(self.entries)
