"""
JsonPersistence: one collection persisted as one JSON array.

Every call loads the whole array from storage, works on it in memory and,
for mutations, writes the whole array back. Nothing is cached between
calls. There is no locking: two read-modify-write cycles racing on the same
file resolve as last-writer-wins.

Usage::

    people = JsonPersistence("data/people.json")
    await people.init()
    await people.add({"name": "yolo", "id": 1})
    await people.update(lambda p: p["id"] == 1, lambda p: p.update(name="yolo2"))
    matches = await people.query(lambda p: p["name"].startswith("yo"))
"""

import logging
from typing import Any, Callable, Iterable, Optional, Union

from pydantic import BaseModel

from .codec import EMPTY_COLLECTION, CollectionCodec
from .errors import FileAlreadyExistsError, NoItemsFoundError
from .repositories import LocalFileSystem, StorageProtocol

__all__ = ["JsonPersistence", "Predicate", "Mutator"]

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]
Mutator = Callable[[Any], Any]


class JsonPersistence:
    """
    Async CRUD over a single JSON-array file.

    Each operation issues at most one read and at most one write to the
    storage backend. Storage errors propagate unchanged; a failure before
    the write leaves the file untouched.
    """

    def __init__(
        self,
        path,
        fs: Optional[StorageProtocol] = None,
        model: Optional[type[BaseModel]] = None,
    ):
        self.path = str(path)
        self.fs = fs if fs is not None else LocalFileSystem()
        self.codec = CollectionCodec(model)

    def __repr__(self) -> str:
        return f"JsonPersistence({self.path!r})"

    # ── Internal helpers ───────────────────────────────────────────────

    async def _load(self) -> list:
        text = await self.fs.read_file(self.path)
        records = self.codec.decode(text, self.path)
        logger.debug("Loaded %d records from %s", len(records), self.path)
        return records

    async def _save(self, records: list) -> None:
        text = self.codec.encode(records)
        await self.fs.write_file(self.path, text)
        logger.debug("Saved %d records to %s", len(records), self.path)

    # ── Lifecycle ──────────────────────────────────────────────────────

    async def init(self) -> None:
        """Create the file as an empty array. Refuses to touch an existing file."""
        if await self.fs.exists(self.path):
            raise FileAlreadyExistsError()
        await self.fs.write_file(self.path, EMPTY_COLLECTION)
        logger.info("Initialised empty collection at %s", self.path)

    # ── Reads ──────────────────────────────────────────────────────────

    async def get_all(self) -> list:
        return await self._load()

    async def query(self, predicate: Predicate) -> list:
        """Records satisfying *predicate*, in stored order. Empty list if none."""
        return [r for r in await self._load() if predicate(r)]

    async def check_if_empty(self) -> bool:
        return len(await self._load()) == 0

    # ── Writes ─────────────────────────────────────────────────────────

    async def add(self, record) -> None:
        await self.add_range([record])

    async def add_range(self, records: Iterable) -> None:
        """Append *records* in order with a single read and a single write."""
        new = [self.codec.coerce(r) for r in records]
        current = await self._load()
        current.extend(new)
        await self._save(current)

    async def update(
        self,
        predicate: Predicate,
        mutator: Mutator,
        no_match_error: Union[BaseException, type[BaseException], str, None] = None,
    ) -> int:
        """
        Apply *mutator* in place to every record matching *predicate*.

        The mutator edits the record it is given; its return value is
        ignored and the record keeps its position. When nothing matches the
        file is not written and *no_match_error* is raised (an exception
        instance as is, an exception class instantiated with no arguments, a
        string as NoItemsFoundError(message)), falling back to
        NoItemsFoundError("No items found").

        Returns the number of records updated.
        """
        records = await self._load()
        matched = [r for r in records if predicate(r)]
        if not matched:
            if isinstance(no_match_error, BaseException):
                raise no_match_error
            if isinstance(no_match_error, type) and issubclass(no_match_error, BaseException):
                raise no_match_error()
            if no_match_error:
                raise NoItemsFoundError(no_match_error)
            raise NoItemsFoundError()
        for record in matched:
            mutator(record)
        await self._save(records)
        return len(matched)

    async def remove(self, predicate: Predicate) -> int:
        """
        Drop every record matching *predicate*, keeping the rest in order.

        The collection is rewritten even when nothing matched. Returns the
        number of records removed.
        """
        records = await self._load()
        kept = [r for r in records if not predicate(r)]
        await self._save(kept)
        return len(records) - len(kept)
