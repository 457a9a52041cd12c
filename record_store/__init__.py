"""
record_store - file-backed JSON record collections.

Public API
──────────
JsonPersistence   - async CRUD over one JSON-array file
StorageProtocol   - storage backend interface (exists / read_file / write_file)
LocalFileSystem   - default backend on the local disk
open_collection   - JsonPersistence for a named collection in the data dir
"""

from .config import Settings, configure_logging, get_settings
from .errors import (
    CorruptCollectionError,
    FileAlreadyExistsError,
    NoItemsFoundError,
    RecordSerializationError,
    RecordStoreError,
)
from .persistence import JsonPersistence
from .repositories import LocalFileSystem, StorageProtocol
from .store import collection_path, ensure_collection, list_collections, open_collection

__all__ = [
    "JsonPersistence",
    "StorageProtocol",
    "LocalFileSystem",
    "Settings",
    "get_settings",
    "configure_logging",
    "collection_path",
    "open_collection",
    "ensure_collection",
    "list_collections",
    "RecordStoreError",
    "FileAlreadyExistsError",
    "NoItemsFoundError",
    "CorruptCollectionError",
    "RecordSerializationError",
]

__version__ = "0.1.0"
