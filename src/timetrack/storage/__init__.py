"""Storage backends."""

from .base import StorageBackend
from .file import FileStore
from .memory import MemoryStore

__all__ = ["FileStore", "MemoryStore", "StorageBackend"]
