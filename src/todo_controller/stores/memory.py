# src/todo_controller/stores/memory.py

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace

from ..core.models import Task, TaskCounts, TaskId, TaskQuery
from ._ids import coerce_task_id

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """
    Process-local task store.

    - ids come from a monotonic counter and are never reused
    - insertion order is preserved
    - reads return copies; callers never hold live records
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: dict[TaskId, Task] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()
        for t in tasks or []:
            self._tasks[t.id] = replace(t)
            self._next_id = max(self._next_id, t.id + 1)
        logger.info("InMemoryTaskStore ready total=%s", len(self._tasks))

    async def read(self, query: TaskQuery | None = None) -> list[Task]:
        query = query or TaskQuery()
        if query.id is not None:
            query = replace(query, id=coerce_task_id(query.id))
        async with self._lock:
            return [replace(t) for t in self._tasks.values() if query.matches(t)]

    async def get_count(self) -> TaskCounts:
        async with self._lock:
            return TaskCounts.of(list(self._tasks.values()))

    async def create(self, title: str) -> Task:
        async with self._lock:
            task = Task(id=self._next_id, title=title, completed=False)
            self._tasks[task.id] = task
            self._next_id += 1
            logger.debug("Task created id=%s", task.id)
            return replace(task)

    async def update(
        self,
        task_id: TaskId,
        *,
        title: str | None = None,
        completed: bool | None = None,
    ) -> None:
        task_id = coerce_task_id(task_id)
        async with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                logger.debug("update: unknown task id=%s", task_id)
                return
            if title is not None:
                task.title = title
            if completed is not None:
                task.completed = bool(completed)
            logger.debug("Task updated id=%s title=%s completed=%s", task_id, title, completed)

    async def remove(self, task_id: TaskId) -> None:
        task_id = coerce_task_id(task_id)
        async with self._lock:
            if self._tasks.pop(task_id, None) is None:
                logger.debug("remove: unknown task id=%s", task_id)
                return
            logger.debug("Task removed id=%s", task_id)
