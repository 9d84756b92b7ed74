"""In-memory storage backend."""

from __future__ import annotations

import asyncio


class MemoryStore:
    """In-memory store. Good for tests and short-lived scripts.

    Counts reads and writes so callers can check how often the store hit "disk".
    """

    def __init__(self, initial: str | None = None) -> None:
        self.content = initial
        self.reads = 0
        self.writes = 0

    @property
    def location(self) -> str:
        return "memory"

    async def read_text(self) -> str:
        self.reads += 1
        await asyncio.sleep(0)
        if self.content is None:
            raise FileNotFoundError("memory store is empty")
        return self.content

    async def write_text(self, payload: str) -> None:
        self.writes += 1
        await asyncio.sleep(0)
        self.content = payload
