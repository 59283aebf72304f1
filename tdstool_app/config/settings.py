"""
Basic settings and logging configuration for the TDS tool.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path


def _get_resource_root() -> Path:

    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parents[2]


def _get_user_data_dir(resource_root: Path) -> Path:

    if getattr(sys, "frozen", False):
        exe_path = Path(getattr(sys, "executable", resource_root))
        return exe_path.parent / "tdstool_app_data"
    return resource_root / "tdstool_app_data"


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    log_path: Path

    @classmethod
    def default(cls) -> "Settings":
        resource_root = _get_resource_root()
        data_dir = _get_user_data_dir(resource_root)
        data_dir.mkdir(exist_ok=True)
        return cls(
            project_root=resource_root,
            data_dir=data_dir,
            log_path=data_dir / "tdstool.log",
        )

    @classmethod
    def for_data_dir(cls, data_dir: Path) -> "Settings":
        """Settings rooted at an explicit data directory (tests, portable installs)."""
        data_dir = Path(data_dir)
        data_dir.mkdir(parents=True, exist_ok=True)
        return cls(
            project_root=_get_resource_root(),
            data_dir=data_dir,
            log_path=data_dir / "tdstool.log",
        )


def init_logging(settings: Settings, level: int = logging.INFO) -> None:
    """Configure basic logging to the settings log file."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(settings.log_path, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info("Logging initialized. Data dir at %s", settings.data_dir)
