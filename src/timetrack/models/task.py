"""Task, time entry and timer models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .resource import Resource

TASKS = "tasks"
TIMERS = "timers"


class TimeEntry(BaseModel):
    """Closed interval of tracked time, in epoch milliseconds."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    start: int = Field(alias="from", ge=0)
    end: int = Field(alias="to", ge=0)

    @property
    def duration_ms(self) -> int:
        return self.end - self.start

    @model_validator(mode="after")
    def validate_order(self) -> TimeEntry:
        if self.end < self.start:
            raise ValueError(f"Time entry ends before it starts: {self.start} > {self.end}")
        return self


class Task(Resource):
    """Named task with its ordered time entries."""

    type: Literal["tasks"] = "tasks"
    name: str = "Unnamed task"
    entries: list[TimeEntry] = Field(default_factory=list)

    @property
    def total_ms(self) -> int:
        return sum(entry.duration_ms for entry in self.entries)


class Timer(Resource):
    """Marks the single ongoing task and when it was started."""

    type: Literal["timers"] = "timers"
    task_id: int = Field(ge=0)
    started_at: int = Field(ge=0)
