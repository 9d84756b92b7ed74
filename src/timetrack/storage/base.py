"""Storage backend abstractions."""

from __future__ import annotations

from typing import Protocol


class StorageBackend(Protocol):
    """Protocol for the text blob holding the serialized graph.

    ``read_text`` raises ``FileNotFoundError`` when nothing was written yet.
    ``write_text`` always replaces the whole content.
    """

    @property
    def location(self) -> str: ...
    async def read_text(self) -> str: ...
    async def write_text(self, payload: str) -> None: ...
