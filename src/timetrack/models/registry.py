"""Schemas registered per resource type."""

from __future__ import annotations

from .resource import Resource, Schemas
from .task import TASKS, TIMERS, Task, Timer

DEFAULT_SCHEMAS: Schemas = {TASKS: Task, TIMERS: Timer}


def schema_for(resource_type: str, schemas: Schemas) -> type[Resource]:
    return schemas.get(resource_type, Resource)
