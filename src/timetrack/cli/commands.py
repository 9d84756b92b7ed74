"""Subcommand implementations."""

from __future__ import annotations

import argparse
import sys

from ..core import ResourceStore, TaskTracker
from ..exceptions import TimetrackError
from ..renderers import render_graph, render_tasks
from ..serializers import graph_to_json


async def run_command(args: argparse.Namespace, store: ResourceStore) -> int:
    tracker = TaskTracker(store)
    try:
        if args.command == "list":
            return await run_list(tracker)
        if args.command == "add":
            return await run_add(tracker, args.name)
        if args.command == "toggle":
            return await run_toggle(tracker, args.task_id)
        if args.command == "stop":
            return await run_stop(tracker)
        if args.command == "delete":
            return await run_delete(tracker, args.task_id)
        if args.command == "inspect":
            return await run_inspect(store, as_json=args.json)
    except TimetrackError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error accessing data file: {exc}", file=sys.stderr)
        return 1
    raise ValueError(f"Unknown command: {args.command}")


async def run_list(tracker: TaskTracker) -> int:
    tasks = await tracker.list_tasks()
    timer = await tracker.ongoing()
    print(render_tasks(tasks, timer.task_id if timer is not None else None), end="")
    return 0


async def run_add(tracker: TaskTracker, name: str) -> int:
    task = await tracker.create_task(name)
    print(f"Created task {task.id}: {task.name}")
    return 0


async def run_toggle(tracker: TaskTracker, task_id: int) -> int:
    ongoing = await tracker.start_stop_task(task_id)
    if ongoing is None:
        print(f"Stopped task {task_id}")
    else:
        print(f"Started task {ongoing}")
    return 0


async def run_stop(tracker: TaskTracker) -> int:
    task = await tracker.stop()
    if task is None:
        print("No task is running")
    else:
        print(f"Stopped task {task.id}")
    return 0


async def run_delete(tracker: TaskTracker, task_id: int) -> int:
    task = await tracker.delete_task(task_id)
    print(f"Deleted task {task_id}: {task.name}")
    return 0


async def run_inspect(store: ResourceStore, *, as_json: bool) -> int:
    graph = await store.load()
    if as_json:
        print(graph_to_json(graph, indent=2))
        return 0
    print(render_graph(graph, location=store.backend.location), end="")
    return 0
