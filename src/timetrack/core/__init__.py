"""Core store runtime."""

from .paths import user_data_dir
from .store import ResourceStore, StoreState, open_store
from .store_config import StoreConfig
from .tracker import TaskTracker

__all__ = [
    "ResourceStore",
    "StoreConfig",
    "StoreState",
    "TaskTracker",
    "open_store",
    "user_data_dir",
]
