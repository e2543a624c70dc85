# src/todo_controller/core/models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

TaskId = int


class Filter(StrEnum):
    """
    Which slice of the list is shown.

    Derived from the route fragment on every navigation; never persisted.
    """

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    id: TaskId
    title: str
    completed: bool = False


@dataclass(slots=True, frozen=True)
class TaskQuery:
    """
    Store-side filter.

    Every field left as None is ignored, so `TaskQuery()` matches all tasks.
    """

    completed: bool | None = None
    id: TaskId | None = None

    def matches(self, task: Task) -> bool:
        if self.id is not None and task.id != self.id:
            return False
        if self.completed is not None and bool(task.completed) != self.completed:
            return False
        return True


@dataclass(slots=True, frozen=True)
class TaskCounts:
    active: int
    completed: int
    total: int

    @classmethod
    def of(cls, tasks: list[Task]) -> TaskCounts:
        done = sum(1 for t in tasks if t.completed)
        return cls(active=len(tasks) - done, completed=done, total=len(tasks))
