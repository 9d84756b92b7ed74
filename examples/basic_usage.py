"""Basic usage example: track a task against a throwaway data file."""

from __future__ import annotations

import asyncio
from pathlib import Path

from timetrack import StoreConfig, Task, TaskTracker, open_store
from timetrack.renderers import render_graph, render_tasks


async def run() -> None:
    output_dir = Path("artifacts")
    store = open_store(StoreConfig(data_dir=output_dir, indent=2))
    tracker = TaskTracker(store)

    report = await tracker.create_task("Write report")
    await tracker.create_task("Review PR")
    assert report.id is not None

    await tracker.start_stop_task(report.id)
    await asyncio.sleep(1.2)
    await tracker.start_stop_task(report.id)

    # Plain store access works the same way.
    tasks = await store.find("tasks")
    stored = await store.find("tasks", report.id)
    if isinstance(stored, Task):
        stored.name = "Write quarterly report"
        await store.save(stored)

    print(f"{len(tasks)} tasks stored")
    print(render_tasks(await tracker.list_tasks()))
    print(render_graph(await store.load(), location=store.backend.location))
    print(f"Data file saved to: {store.config.path}")


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
