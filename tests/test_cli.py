from __future__ import annotations

import json
from pathlib import Path

import pytest

from timetrack.cli import main


def _run(tmp_path: Path, *args: str) -> int:
    return main(["--data-dir", str(tmp_path), *args])


def test_cli_add_and_list(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "add", "Write report") == 0
    assert _run(tmp_path, "add", "Review PR") == 0
    assert _run(tmp_path, "list") == 0

    captured = capsys.readouterr()
    assert "Created task 0: Write report" in captured.out
    assert "Created task 1: Review PR" in captured.out
    assert "Write report" in captured.out.split("Created task 1")[1]
    assert (tmp_path / "db.json").exists()


def test_cli_list_without_tasks(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "list") == 0
    assert "No tasks yet." in capsys.readouterr().out


def test_cli_toggle_start_and_stop(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(tmp_path, "add", "A")
    assert _run(tmp_path, "toggle", "0") == 0
    assert _run(tmp_path, "list") == 0
    assert _run(tmp_path, "toggle", "0") == 0

    captured = capsys.readouterr()
    assert "Started task 0" in captured.out
    assert "running" in captured.out
    assert "Stopped task 0" in captured.out

    raw = json.loads((tmp_path / "db.json").read_text(encoding="utf-8"))
    assert len(raw["tasks"]["0"]["entries"]) == 1
    assert raw["timers"] == {}


def test_cli_stop(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(tmp_path, "add", "A")
    assert _run(tmp_path, "stop") == 0
    _run(tmp_path, "toggle", "0")
    assert _run(tmp_path, "stop") == 0

    captured = capsys.readouterr()
    assert "No task is running" in captured.out
    assert "Stopped task 0" in captured.out


def test_cli_delete(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(tmp_path, "add", "A")
    assert _run(tmp_path, "delete", "0") == 0
    assert "Deleted task 0: A" in capsys.readouterr().out

    raw = json.loads((tmp_path / "db.json").read_text(encoding="utf-8"))
    assert raw == {"tasks": {}}


def test_cli_unknown_task(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, "toggle", "5") == 1
    assert "task not found: 5" in capsys.readouterr().err


def test_cli_inspect_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(tmp_path, "add", "A")
    capsys.readouterr()
    assert _run(tmp_path, "inspect", "--json") == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"tasks": {"0": {"type": "tasks", "id": 0, "name": "A", "entries": []}}}


def test_cli_inspect_tree(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(tmp_path, "add", "A")
    assert _run(tmp_path, "inspect") == 0
    output = capsys.readouterr().out
    assert f"Store: {tmp_path / 'db.json'}" in output
    assert "tasks (1)" in output


def test_cli_corrupt_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "db.json").write_text("NOT JSON AT ALL", encoding="utf-8")
    assert _run(tmp_path, "list") == 1
    assert "error" in capsys.readouterr().err.lower()


def test_cli_defaults_to_user_data_dir(capsys: pytest.CaptureFixture[str]) -> None:
    # the autouse fixture points TIMETRACK_DATA_DIR at a temp directory
    assert main(["add", "A"]) == 0
    assert "Created task 0: A" in capsys.readouterr().out
