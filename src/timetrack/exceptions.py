"""Public exception types for timetrack."""

from __future__ import annotations


class TimetrackError(Exception):
    """Base class for all timetrack exceptions."""


class MissingTypeError(TimetrackError):
    """Raised when a resource without a ``type`` is saved or deleted."""

    def __init__(self) -> None:
        super().__init__("resources must have a type")


class UnrecognizedTypeError(TimetrackError):
    """Raised when ``find`` is asked for a type that has no partition."""

    def __init__(self, resource_type: str) -> None:
        super().__init__(f"unrecognized type: {resource_type!r}")
        self.resource_type = resource_type


class InvalidResourceError(TimetrackError):
    """Raised when a resource does not satisfy the schema registered for its type."""


class StoreLoadError(TimetrackError):
    """Raised when the data file cannot be loaded or parsed."""


class TaskNotFoundError(TimetrackError):
    """Raised when a tracker operation refers to a task id that is not persisted."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"task not found: {task_id}")
        self.task_id = task_id
