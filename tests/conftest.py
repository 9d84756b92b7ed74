from __future__ import annotations

from pathlib import Path

import pytest

from timetrack.core import ResourceStore, StoreConfig
from timetrack.core.paths import DATA_DIR_ENV
from timetrack.storage import FileStore, MemoryStore


@pytest.fixture(autouse=True)
def _isolate_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep every test away from the real user data directory."""
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "userdata"))


@pytest.fixture
def backend() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def store(backend: MemoryStore) -> ResourceStore:
    return ResourceStore(backend)


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "db.json"


@pytest.fixture
def file_store(db_path: Path) -> ResourceStore:
    return ResourceStore(FileStore(db_path), config=StoreConfig(data_dir=db_path.parent))
