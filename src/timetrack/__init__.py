"""timetrack — task time tracking on a file-backed resource store.

Convenience API:
    store = timetrack.open_store()            -> store on <user data dir>/db.json
    tracker = timetrack.TaskTracker(store)    -> create/list/delete/start/stop tasks

DI API (construct your own store):
    from timetrack.core import ResourceStore, StoreConfig
    from timetrack.storage import FileStore
    store = ResourceStore(FileStore(path), config=StoreConfig(indent=2))
    await store.save(Task(name="Write report"))
    tasks = await store.find("tasks")
"""

from __future__ import annotations

from .core import ResourceStore, StoreConfig, StoreState, TaskTracker, open_store
from .exceptions import (
    InvalidResourceError,
    MissingTypeError,
    StoreLoadError,
    TaskNotFoundError,
    TimetrackError,
    UnrecognizedTypeError,
)
from .models import Resource, Task, TimeEntry, Timer
from .storage import FileStore, MemoryStore, StorageBackend

__all__ = [
    "FileStore",
    "InvalidResourceError",
    "MemoryStore",
    "MissingTypeError",
    "Resource",
    "ResourceStore",
    "StorageBackend",
    "StoreConfig",
    "StoreLoadError",
    "StoreState",
    "Task",
    "TaskNotFoundError",
    "TaskTracker",
    "TimeEntry",
    "Timer",
    "TimetrackError",
    "UnrecognizedTypeError",
    "open_store",
]
