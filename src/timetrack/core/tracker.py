"""Task bookkeeping and the single running timer."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable
from datetime import UTC, datetime
from typing import cast

from ..exceptions import TaskNotFoundError, UnrecognizedTypeError
from ..models import TASKS, TIMERS, Resource, Task, TimeEntry, Timer
from .store import ResourceStore

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(datetime.now(UTC).timestamp() * 1000)


class TaskTracker:
    """Creates, lists and deletes tasks and times one task at a time.

    The running timer is persisted as a ``Timer`` resource so it survives
    restarts. Stopping it appends a ``TimeEntry`` to the timed task.
    """

    def __init__(self, store: ResourceStore, clock: Callable[[], int] | None = None) -> None:
        self.store = store
        self.clock = clock or now_ms

    async def list_tasks(self) -> list[Task]:
        return cast(list[Task], await self._find_all(TASKS))

    async def get_task(self, task_id: int) -> Task:
        try:
            task = await self.store.find(TASKS, task_id)
        except UnrecognizedTypeError:
            task = None
        if task is None:
            raise TaskNotFoundError(task_id)
        return cast(Task, task)

    async def create_task(self, name: str) -> Task:
        task = Task(name=name)
        await self.store.save(task)
        logger.debug("Created task %d (%s)", task.id, name)
        return task

    async def delete_task(self, task_id: int) -> Task:
        task = await self.get_task(task_id)
        timer = await self._running()
        if timer is not None and timer.task_id == task_id:
            await self.store.delete(timer)
        await self.store.delete(task)
        return task

    async def ongoing(self) -> Timer | None:
        """Return the running timer.

        Only one timer should ever be stored. If a data file holds more, the
        most recently started one wins.
        """
        timers = cast(list[Timer], await self._find_all(TIMERS))
        if len(timers) > 1:
            warnings.warn(
                f"timetrack: {len(timers)} timers stored. Using the most recently started one.",
                stacklevel=2,
            )
        return max(timers, key=lambda timer: timer.started_at, default=None)

    async def start_stop_task(self, task_id: int) -> int | None:
        """Toggle timing of ``task_id``.

        A timer running on another task is stopped first. Returns the id of
        the task being timed afterwards, or ``None`` when timing stopped.
        """
        await self.get_task(task_id)
        timer = await self._running()
        if timer is not None:
            await self._stop(timer)
            if timer.task_id == task_id:
                return None
        await self.store.save(Timer(task_id=task_id, started_at=self.clock()))
        logger.debug("Started timer on task %d", task_id)
        return task_id

    async def stop(self) -> Task | None:
        """Stop the running timer, if any, and return the task it was timing."""
        timer = await self._running()
        if timer is None:
            return None
        return await self._stop(timer)

    async def _running(self) -> Timer | None:
        """Return the running timer after deleting any surplus timers unrecorded."""
        timer = await self.ongoing()
        for other in await self._find_all(TIMERS):
            if other is not timer:
                logger.debug("Dropping surplus timer %d on task %d", other.id, cast(Timer, other).task_id)
                await self.store.delete(other)
        return timer

    async def _stop(self, timer: Timer) -> Task | None:
        try:
            task = await self.get_task(timer.task_id)
        except TaskNotFoundError:
            warnings.warn(
                f"timetrack: timer refers to missing task {timer.task_id}. Dropping it.",
                stacklevel=2,
            )
            task = None
        else:
            end = max(self.clock(), timer.started_at)
            task.entries.append(TimeEntry(start=timer.started_at, end=end))
            await self.store.save(task)
            logger.debug("Stopped timer on task %d after %d ms", task.id, end - timer.started_at)
        await self.store.delete(timer)
        return task

    async def _find_all(self, resource_type: str) -> list[Resource]:
        try:
            return await self.store.find(resource_type)
        except UnrecognizedTypeError:
            return []
