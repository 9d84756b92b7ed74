"""Rich-based console rendering for tasks and the raw graph."""

from __future__ import annotations

import json
from collections.abc import Sequence
from io import StringIO

from rich.console import Console, RenderableType
from rich.table import Table
from rich.tree import Tree

from ..models import Graph, Task

_MAX_VALUE_LEN = 200

_SECOND_UNITS = (
    ("y", 12 * 4 * 7 * 24 * 60 * 60),
    ("m", 4 * 7 * 24 * 60 * 60),
    ("w", 7 * 24 * 60 * 60),
    ("d", 24 * 60 * 60),
    ("hr", 60 * 60),
    ("min", 60),
)


def friendly_time(milliseconds: int) -> str:
    """Format a duration as e.g. ``"1hr 5sec"``. A month is four weeks."""
    seconds = max(milliseconds, 0) // 1000
    parts: list[str] = []
    for label, size in _SECOND_UNITS:
        if seconds >= size:
            count, seconds = divmod(seconds, size)
            parts.append(f"{count}{label}")
    parts.append(f"{seconds}sec")
    return " ".join(parts)


def render_tasks(tasks: Sequence[Task], ongoing_task_id: int | None = None) -> str:
    if not tasks:
        return "No tasks yet.\n"
    table = Table(title="Tasks")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("Entries", justify="right")
    table.add_column("Total")
    table.add_column("")
    for task in tasks:
        running = "running" if task.id is not None and task.id == ongoing_task_id else ""
        table.add_row(
            str(task.id),
            task.name,
            str(len(task.entries)),
            friendly_time(task.total_ms),
            running,
        )
    return _export(table)


def render_graph(graph: Graph, *, location: str = "") -> str:
    tree = Tree(f"Store: {location}" if location else "Store")
    for resource_type, partition in graph.items():
        branch = tree.add(f"{resource_type} ({len(partition)})")
        for resource_id, resource in partition.items():
            data = resource.model_dump(mode="json", by_alias=True, exclude={"type", "id"})
            branch.add(f"#{resource_id} {_format_data(data)}")
    return _export(tree)


def _export(renderable: RenderableType) -> str:
    console = Console(record=True, width=120, markup=False, file=StringIO())
    console.print(renderable)
    return console.export_text()


def _format_data(data: dict[str, object]) -> str:
    """Format dict for display, truncating large values."""
    s = json.dumps(data, ensure_ascii=False)
    if len(s) <= _MAX_VALUE_LEN:
        return s
    return s[:_MAX_VALUE_LEN] + "... [truncated]"
