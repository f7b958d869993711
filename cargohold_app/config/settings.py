"""
Basic settings and logging configuration for the cargohold app.

The package has no entry point of its own; applications embedding it bootstrap
logging once at startup with ``init_logging(Settings.default())``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


def _get_project_root() -> Path:
    return Path(__file__).resolve().parents[2]


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    log_level: int = logging.INFO
    log_file: Path | None = None

    @classmethod
    def default(cls) -> "Settings":
        return cls(project_root=_get_project_root())


def init_logging(settings: Settings) -> None:
    """Configure basic logging to console and optional file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file is not None:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=handlers,
        force=True,
    )

    logging.getLogger(__name__).info("Logging initialized. Project root %s", settings.project_root)
