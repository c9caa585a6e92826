"""Filesystem side effects of a copy run."""

from __future__ import annotations

import logging
from pathlib import Path

from template_copy.copier.errors import DirectoryCreateError, TemplateIOError

logger = logging.getLogger(__name__)

# Bytes that are not valid UTF-8 round-trip through surrogate escapes
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


def ensure_directory(directory: Path) -> None:
    """Create ``directory`` and missing ancestors.

    A failed ``mkdir`` only counts as an error when the directory still does
    not exist afterwards, since another process may have created it.
    """
    if directory.is_dir():
        return
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        if not directory.is_dir():
            raise DirectoryCreateError(directory) from exc
    logger.debug("Created directory %s", directory)


def write_target_file(target: Path, content: str) -> None:
    """Write ``content`` to ``target``, replacing any existing file.

    No newline translation happens, so line endings are written as given.
    """
    ensure_directory(target.parent)
    try:
        with target.open("w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise TemplateIOError(target, str(exc)) from exc
