"""
Local disk implementation of StorageProtocol.
Blocking file I/O runs on a worker thread so the event loop is never held.
"""

import asyncio
import logging
import threading
from pathlib import Path

logger = logging.getLogger(__name__)

_lock = threading.Lock()


class LocalFileSystem:
    """UTF-8 text files on the local disk."""

    def __init__(self, atomic_writes: bool = True):
        self.atomic_writes = atomic_writes

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(Path(path).exists)

    async def read_file(self, path: str) -> str:
        return await asyncio.to_thread(self._read, Path(path))

    async def write_file(self, path: str, text: str) -> None:
        await asyncio.to_thread(self._write, Path(path), text)

    # ── Internal helpers ───────────────────────────────────────────────

    def _read(self, path: Path) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def _write(self, path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        if not self.atomic_writes:
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
            return
        with _lock:
            tmp = path.with_name(path.name + ".tmp")
            try:
                with open(tmp, "w", encoding="utf-8") as f:
                    f.write(text)
                tmp.replace(path)
            except BaseException:
                tmp.unlink(missing_ok=True)
                raise
        logger.debug("Wrote %d chars to %s", len(text), path)
