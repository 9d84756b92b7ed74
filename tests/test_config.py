from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from timetrack.core import StoreConfig, open_store, user_data_dir
from timetrack.core.paths import DATA_DIR_ENV
from timetrack.storage import FileStore


def test_env_override_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    assert user_data_dir() == tmp_path


@pytest.mark.skipif(sys.platform.startswith("win") or sys.platform == "darwin", reason="XDG only")
def test_xdg_data_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert user_data_dir() == tmp_path / "timetrack"
    assert user_data_dir("other") == tmp_path / "other"


@pytest.mark.skipif(sys.platform.startswith("win") or sys.platform == "darwin", reason="XDG only")
def test_xdg_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DATA_DIR_ENV, raising=False)
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)
    assert user_data_dir() == Path.home() / ".local" / "share" / "timetrack"


def test_store_config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert StoreConfig(data_dir=tmp_path).path == tmp_path / "db.json"
    assert StoreConfig(data_dir=tmp_path, filename="other.json").path == tmp_path / "other.json"

    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "env"))
    assert StoreConfig().path == tmp_path / "env" / "db.json"


def test_store_config_validation() -> None:
    with pytest.raises(ValidationError):
        StoreConfig(filename="")
    with pytest.raises(ValidationError):
        StoreConfig(indent=-1)


def test_open_store_uses_file_backend(tmp_path: Path) -> None:
    store = open_store(StoreConfig(data_dir=tmp_path, indent=2))
    assert isinstance(store.backend, FileStore)
    assert store.backend.path == tmp_path / "db.json"
    assert store.config.indent == 2
