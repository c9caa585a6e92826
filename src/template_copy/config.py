"""Environment-driven settings and logging setup."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

REGISTRY_ENV = "TEMPLATE_COPY_REGISTRY"
LOG_LEVEL_ENV = "TEMPLATE_COPY_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    registry_file: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``environ`` (defaults to ``os.environ``)."""
    env = os.environ if environ is None else environ

    registry = env.get(REGISTRY_ENV, "").strip()
    level = env.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        level = DEFAULT_LOG_LEVEL

    return Settings(
        registry_file=Path(registry).expanduser() if registry else None,
        log_level=level,
    )


def configure_logging(level: str | int, console: Console | None = None) -> logging.Logger:
    """Route ``template_copy`` log records through a Rich handler on stderr."""
    logger = logging.getLogger("template_copy")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
