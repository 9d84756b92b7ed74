"""Command line interface for timetrack."""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

from ..core import StoreConfig, open_store
from .commands import run_command


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="timetrack")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding db.json (defaults to the user data directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List tasks with their tracked time")

    add_parser = subparsers.add_parser("add", help="Create a task")
    add_parser.add_argument("name", help="Task name")

    toggle_parser = subparsers.add_parser("toggle", help="Start or stop timing a task")
    toggle_parser.add_argument("task_id", type=int, help="Task ID")

    subparsers.add_parser("stop", help="Stop the running timer")

    delete_parser = subparsers.add_parser("delete", help="Delete a task")
    delete_parser.add_argument("task_id", type=int, help="Task ID")

    inspect_parser = subparsers.add_parser("inspect", help="Show every stored resource")
    inspect_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the stored graph as JSON instead of a tree",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    store = open_store(StoreConfig(data_dir=args.data_dir))
    return asyncio.run(run_command(args, store))


if __name__ == "__main__":
    raise SystemExit(main())
