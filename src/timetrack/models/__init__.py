"""Data models for persisted resources."""

from .registry import DEFAULT_SCHEMAS, schema_for
from .resource import Graph, Resource, Schemas
from .task import TASKS, TIMERS, Task, TimeEntry, Timer

__all__ = [
    "DEFAULT_SCHEMAS",
    "TASKS",
    "TIMERS",
    "Graph",
    "Resource",
    "Schemas",
    "Task",
    "TimeEntry",
    "Timer",
    "schema_for",
]
