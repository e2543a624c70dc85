# tests/fakes.py

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field, replace
from typing import Any

from todo_controller.core.events import EventPayload, RenderInstruction, ViewEvent
from todo_controller.core.models import Task, TaskCounts, TaskId, TaskQuery
from todo_controller.core.ports import EventHandler


class FakeTaskRepo:
    """
    In-memory TaskRepo that records every call.

    - `calls` holds ("read", query), ("update", id, changes), ... tuples
    - `delays` lets a test hold back individual per-item completions
      (update/remove) to shuffle fan-out completion order
    """

    def __init__(self, tasks: list[Task] | None = None, *, delays: dict[TaskId, float] | None = None) -> None:
        self.tasks: list[Task] = [replace(t) for t in tasks or []]
        self.delays = dict(delays or {})
        self.calls: list[tuple[Any, ...]] = []
        self._next_id = max((t.id for t in self.tasks), default=0) + 1

    def calls_named(self, name: str) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == name]

    async def _maybe_delay(self, task_id: TaskId) -> None:
        delay = self.delays.get(task_id)
        if delay:
            await asyncio.sleep(delay)

    async def read(self, query: TaskQuery | None = None) -> list[Task]:
        self.calls.append(("read", query))
        q = query or TaskQuery()
        return [replace(t) for t in self.tasks if q.matches(t)]

    async def get_count(self) -> TaskCounts:
        self.calls.append(("get_count",))
        return TaskCounts.of(self.tasks)

    async def create(self, title: str) -> Task:
        self.calls.append(("create", title))
        task = Task(id=self._next_id, title=title)
        self._next_id += 1
        self.tasks.append(task)
        return replace(task)

    async def update(self, task_id: TaskId, *, title: str | None = None, completed: bool | None = None) -> None:
        changes = {k: v for k, v in (("title", title), ("completed", completed)) if v is not None}
        self.calls.append(("update", task_id, changes))
        await self._maybe_delay(task_id)
        for t in self.tasks:
            if t.id == task_id:
                if title is not None:
                    t.title = title
                if completed is not None:
                    t.completed = completed

    async def remove(self, task_id: TaskId) -> None:
        self.calls.append(("remove", task_id))
        await self._maybe_delay(task_id)
        self.tasks = [t for t in self.tasks if t.id != task_id]


@dataclass(slots=True)
class FakeView:
    """
    View stub: records render calls and lets tests trigger bound events.
    """

    renders: list[tuple[RenderInstruction, Any]] = field(default_factory=list)
    handlers: dict[ViewEvent, EventHandler] = field(default_factory=dict)
    bind_calls: list[ViewEvent] = field(default_factory=list)

    def render(self, instruction: RenderInstruction, payload: Any = None) -> None:
        self.renders.append((instruction, payload))

    def bind(self, event: ViewEvent, handler: EventHandler) -> None:
        self.bind_calls.append(event)
        self.handlers[event] = handler

    async def trigger(self, event: ViewEvent, payload: EventPayload) -> None:
        await self.handlers[event](payload)

    def rendered(self, instruction: RenderInstruction, payload: Any = None) -> bool:
        return (instruction, payload) in self.renders

    def payloads(self, instruction: RenderInstruction) -> list[Any]:
        return [p for i, p in self.renders if i == instruction]

    def reset(self) -> None:
        self.renders.clear()
