# src/todo_controller/core/controller.py

"""
Controller.

The only component that talks to both collaborators:
- resolves the route fragment into a filter and a store query,
- turns view events into store operations,
- turns store results into render instructions.

It never keeps task data between calls. Every projection the view receives is
derived from a fresh store call; the only thing remembered is the last route,
so post-mutation refreshes stay on the same filter.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from .events import (
    PAYLOAD_TYPES,
    EventPayload,
    ItemEdit,
    ItemEditCancel,
    ItemEditDone,
    ItemRemove,
    ItemToggle,
    NewTodo,
    RemoveCompleted,
    RenderInstruction,
    ToggleAll,
    ViewEvent,
)
from .models import Filter, TaskId, TaskQuery
from .ports import EventHandler, TaskRepo, View
from .render import count_projections
from .routing import DEFAULT_ROUTE, Route, resolve_route

logger = logging.getLogger(__name__)


class Controller:
    def __init__(self, store: TaskRepo, view: View) -> None:
        self._store = store
        self._view = view
        self._route: Route = DEFAULT_ROUTE

        self._handlers: dict[ViewEvent, EventHandler] = {
            ViewEvent.NEW_TODO: self._on_new_todo,
            ViewEvent.ITEM_REMOVE: self._on_item_remove,
            ViewEvent.ITEM_TOGGLE: self._on_item_toggle,
            ViewEvent.TOGGLE_ALL: self._on_toggle_all,
            ViewEvent.ITEM_EDIT: self._on_item_edit,
            ViewEvent.ITEM_EDIT_DONE: self._on_item_edit_done,
            ViewEvent.ITEM_EDIT_CANCEL: self._on_item_edit_cancel,
            ViewEvent.REMOVE_COMPLETED: self._on_remove_completed,
        }
        for event, handler in self._handlers.items():
            view.bind(event, handler)

    @property
    def route(self) -> Route:
        return self._route

    # ---- public API ----

    async def set_view(self, fragment: str) -> None:
        """
        Show the list for a route fragment ("", "#/", "#/active", "#/completed").

        Full resync: entries for the filter, global counters, filter highlight.
        """
        self._route = resolve_route(fragment)
        logger.debug("set_view fragment=%r filter=%s", fragment, self._route.filter.value)

        await self._show_entries()
        await self._render_counts()
        self._render(RenderInstruction.SET_FILTER, self._route.token)

    async def dispatch(self, event: ViewEvent, payload: EventPayload) -> None:
        """Single entry point equivalent to the view triggering `event`."""
        expected = PAYLOAD_TYPES[event]
        if not isinstance(payload, expected):
            raise TypeError(
                f"{event.value} expects {expected.__name__}, got {type(payload).__name__}"
            )
        await self._handlers[event](payload)

    # ---- render helpers ----

    def _render(self, instruction: RenderInstruction, payload: Any = None) -> None:
        if payload is None:
            self._view.render(instruction)
        else:
            self._view.render(instruction, payload)

    async def _show_entries(self) -> None:
        tasks = await self._store.read(self._route.query)
        self._render(RenderInstruction.SHOW_ENTRIES, tasks)

    async def _render_counts(self) -> None:
        counts = await self._store.get_count()
        for instruction, payload in count_projections(counts):
            self._render(instruction, payload)

    async def _refresh(self) -> None:
        # A changed completed flag can move a task in or out of a filtered list.
        if self._route.filter is not Filter.ALL:
            await self._show_entries()
        await self._render_counts()

    # ---- event handlers ----

    async def _on_new_todo(self, payload: NewTodo) -> None:
        task = await self._store.create(payload.title)
        logger.debug("Created task id=%s", task.id)

        await self._show_entries()
        self._render(RenderInstruction.CLEAR_NEW_TODO)
        await self._render_counts()

    async def _on_item_remove(self, payload: ItemRemove) -> None:
        await self._remove_one(payload.id)
        await self._render_counts()

    async def _on_item_toggle(self, payload: ItemToggle) -> None:
        await self._toggle_one(payload.id, payload.completed)
        await self._refresh()

    async def _on_toggle_all(self, payload: ToggleAll) -> None:
        # The checkbox reflects the whole list, so the toggle spans it too.
        tasks = await self._store.read(TaskQuery(completed=not payload.completed))
        logger.debug("toggle_all completed=%s n=%d", payload.completed, len(tasks))

        await asyncio.gather(*(self._toggle_one(t.id, payload.completed) for t in tasks))
        await self._refresh()

    async def _on_item_edit(self, payload: ItemEdit) -> None:
        for task in await self._read_one(payload.id):
            self._render(RenderInstruction.EDIT_ITEM, {"id": task.id, "title": task.title})

    async def _on_item_edit_done(self, payload: ItemEditDone) -> None:
        title = (payload.title or "").strip()

        if not title:
            # Saving an empty title deletes the task.
            await self._remove_one(payload.id)
            await self._render_counts()
            return

        await self._store.update(payload.id, title=title)
        self._render(RenderInstruction.EDIT_ITEM_DONE, {"id": payload.id, "title": title})

    async def _on_item_edit_cancel(self, payload: ItemEditCancel) -> None:
        for task in await self._read_one(payload.id):
            self._render(RenderInstruction.EDIT_ITEM_DONE, {"id": task.id, "title": task.title})

    async def _on_remove_completed(self, payload: RemoveCompleted) -> None:
        tasks = await self._store.read(TaskQuery(completed=True))
        logger.debug("remove_completed n=%d", len(tasks))

        await asyncio.gather(*(self._remove_one(t.id) for t in tasks))
        await self._refresh()

    # ---- per-item steps ----

    async def _read_one(self, task_id: TaskId):
        tasks = await self._store.read(TaskQuery(id=task_id))
        if not tasks:
            logger.info("Task %s not found; nothing to render", task_id)
        return tasks

    async def _toggle_one(self, task_id: TaskId, completed: bool) -> None:
        await self._store.update(task_id, completed=completed)
        self._render(RenderInstruction.ELEMENT_COMPLETE, {"id": task_id, "completed": completed})

    async def _remove_one(self, task_id: TaskId) -> None:
        await self._store.remove(task_id)
        self._render(RenderInstruction.REMOVE_ITEM, task_id)
