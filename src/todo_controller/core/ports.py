# src/todo_controller/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the controller.

The controller depends on Protocols instead of concrete implementations.
This keeps the store backend and the presentation surface swappable and
makes testing easier.
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from .events import EventPayload, RenderInstruction, ViewEvent
from .models import Task, TaskCounts, TaskId, TaskQuery

EventHandler = Callable[[EventPayload], Awaitable[None]]


class TaskRepo(Protocol):
    """
    Authoritative owner of the task collection.

    Every operation is a coroutine; its completion means the effect is durable.
    """

    async def read(self, query: TaskQuery | None = None) -> list[Task]: ...

    async def get_count(self) -> TaskCounts: ...

    async def create(self, title: str) -> Task: ...

    async def update(
            self,
            task_id: TaskId,
            *,
            title: str | None = None,
            completed: bool | None = None,
    ) -> None: ...

    async def remove(self, task_id: TaskId) -> None: ...


class View(Protocol):
    """
    Presentation surface.

    render() is a synchronous one-way sink. bind() registers the single
    handler the view awaits when the user triggers an event.
    """

    def render(self, instruction: RenderInstruction, payload: Any = None) -> None: ...

    def bind(self, event: ViewEvent, handler: EventHandler) -> None: ...
