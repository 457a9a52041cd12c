"""
Exceptions raised by the record store.
Storage I/O errors are never wrapped; they reach the caller as raised.
"""

__all__ = [
    "RecordStoreError",
    "FileAlreadyExistsError",
    "NoItemsFoundError",
    "CorruptCollectionError",
    "RecordSerializationError",
]


class RecordStoreError(Exception):
    """Root exception for errors originating in record_store itself."""


class FileAlreadyExistsError(RecordStoreError, FileExistsError):
    """init() found the collection file already present."""

    def __init__(self, message: str = "File already exists"):
        super().__init__(message)


class NoItemsFoundError(RecordStoreError, LookupError):
    """update() matched no records."""

    def __init__(self, message: str = "No items found"):
        super().__init__(message)


class CorruptCollectionError(RecordStoreError, ValueError):
    """Collection file content is not a JSON array."""


class RecordSerializationError(RecordStoreError, TypeError):
    """A record could not be encoded to JSON."""
