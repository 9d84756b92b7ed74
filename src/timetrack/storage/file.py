"""File-based storage backend."""

from __future__ import annotations

import asyncio
from pathlib import Path


class FileStore:
    """Reads and overwrites a single UTF-8 file. Blocking I/O runs in a worker thread."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    async def read_text(self) -> str:
        return await asyncio.to_thread(self.path.read_text, encoding="utf-8")

    async def write_text(self, payload: str) -> None:
        await asyncio.to_thread(self._write, payload)

    def _write(self, payload: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(payload, encoding="utf-8")
