"""
Collection facade over a data directory.
Structure on disk:
  <RECORD_STORE_DATA_DIR>/
    {name}.json   - one JSON array per collection
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from .config import Settings, get_settings
from .errors import FileAlreadyExistsError
from .persistence import JsonPersistence
from .repositories import LocalFileSystem

__all__ = ["collection_path", "open_collection", "ensure_collection", "list_collections"]

logger = logging.getLogger(__name__)


def collection_path(name: str, settings: Optional[Settings] = None) -> Path:
    """File backing collection *name*. Rejects names that would escape the data dir."""
    if not name or "/" in name or "\\" in name or ".." in name:
        raise ValueError(f"Invalid collection name: {name!r}")
    settings = settings or get_settings()
    return settings.RECORD_STORE_DATA_DIR / f"{name}.json"


def open_collection(
    name: str,
    model: Optional[type[BaseModel]] = None,
    settings: Optional[Settings] = None,
) -> JsonPersistence:
    settings = settings or get_settings()
    fs = LocalFileSystem(atomic_writes=settings.RECORD_STORE_ATOMIC_WRITES)
    return JsonPersistence(collection_path(name, settings), fs=fs, model=model)


async def ensure_collection(name: str, settings: Optional[Settings] = None) -> bool:
    """Create the collection if missing. True if it was created by this call."""
    try:
        await open_collection(name, settings=settings).init()
    except FileAlreadyExistsError:
        logger.debug("Collection %s already exists", name)
        return False
    return True


def list_collections(settings: Optional[Settings] = None) -> list[str]:
    """Collection names, most recently modified first."""
    settings = settings or get_settings()
    data_dir = settings.RECORD_STORE_DATA_DIR
    if not data_dir.is_dir():
        return []
    found = []
    for p in data_dir.glob("*.json"):
        try:
            found.append((p.stat().st_mtime, p.stem))
        except FileNotFoundError:
            continue
    found.sort(reverse=True)
    return [name for _, name in found]
