"""
Storage interface consumed by JsonPersistence.
Anything with these three coroutines can back a collection.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class StorageProtocol(Protocol):
    """File-system-like primitives keyed by a path identifier."""

    async def exists(self, path: str) -> bool: ...

    async def read_file(self, path: str) -> str: ...

    async def write_file(self, path: str, text: str) -> None: ...
