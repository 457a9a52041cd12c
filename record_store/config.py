"""
record_store configuration.
Single source of truth for environment settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_TRUTHY = ("1", "true", "yes", "on")


def get_settings():
    """Return settings read from the current environment."""
    return Settings()


class Settings:
    """Store settings loaded from environment."""

    # Directory holding one <name>.json file per collection
    RECORD_STORE_DATA_DIR: Path

    # Write to a temp file and rename over the target
    RECORD_STORE_ATOMIC_WRITES: bool = True

    RECORD_STORE_LOG_LEVEL: str = "WARNING"

    def __init__(self):
        data_dir = os.environ.get("RECORD_STORE_DATA_DIR", "data")
        self.RECORD_STORE_DATA_DIR = Path(data_dir)
        atomic = (os.environ.get("RECORD_STORE_ATOMIC_WRITES") or "true").strip().lower()
        self.RECORD_STORE_ATOMIC_WRITES = atomic in _TRUTHY
        level = (os.environ.get("RECORD_STORE_LOG_LEVEL") or "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "WARNING"
        self.RECORD_STORE_LOG_LEVEL = level

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.RECORD_STORE_LOG_LEVEL)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Install a root handler at the configured level."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)
