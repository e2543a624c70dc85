# src/todo_controller/connectors/console_view.py

"""
Console presentation surface.

Prints each render instruction as a short human-readable line and forwards
user events to whatever handler the controller bound for them.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from ..core.events import EventPayload, RenderInstruction, ViewEvent
from ..core.models import Task
from ..core.ports import EventHandler

logger = logging.getLogger(__name__)

_BOLD = "\033[1m"
_DIM = "\033[2m"
_RESET = "\033[0m"

FILTER_LINKS = (("", "All"), ("active", "Active"), ("completed", "Completed"))


class ConsoleView:
    def __init__(self, *, out: TextIO | None = None, color: bool = True) -> None:
        self._out = out or sys.stdout
        self._color = color
        self._handlers: dict[ViewEvent, EventHandler] = {}

        # What the surface currently shows; only the view owns this.
        self.content_visible = False
        self.toggle_all_checked = False
        self.filter_token = ""
        self.editing: set[Any] = set()

    # ---- View port ----

    def bind(self, event: ViewEvent, handler: EventHandler) -> None:
        if event in self._handlers:
            logger.warning("Handler for %s replaced", event.value)
        self._handlers[event] = handler

    def render(self, instruction: RenderInstruction, payload: Any = None) -> None:
        logger.debug("render %s", instruction.value)
        method = getattr(self, f"_render_{instruction.name.lower()}")
        method(payload)

    # ---- user side ----

    async def trigger(self, event: ViewEvent, payload: EventPayload) -> None:
        """Deliver a user action to the bound handler (no-op if nothing is bound)."""
        handler = self._handlers.get(event)
        if handler is None:
            logger.warning("No handler bound for %s", event.value)
            return
        await handler(payload)

    # ---- output helpers ----

    def _style(self, text: str, code: str) -> str:
        return f"{code}{text}{_RESET}" if self._color else text

    def _print(self, text: str) -> None:
        print(text, file=self._out, flush=True)

    @staticmethod
    def _entry_line(task: Task) -> str:
        mark = "[x]" if task.completed else "[ ]"
        return f"  {mark} {task.id:>3}  {task.title}"

    # ---- instructions ----

    def _render_show_entries(self, tasks: list[Task]) -> None:
        if not tasks:
            self._print(self._style("  (nothing to show)", _DIM))
            return
        for task in tasks:
            self._print(self._entry_line(task))

    def _render_remove_item(self, task_id: Any) -> None:
        self.editing.discard(task_id)
        self._print(f"  - removed #{task_id}")

    def _render_update_element_count(self, active: int) -> None:
        noun = "item" if active == 1 else "items"
        self._print(self._style(f"  {active} {noun} left", _DIM))

    def _render_content_block_visibility(self, payload: dict[str, bool]) -> None:
        visible = bool(payload.get("visible"))
        if self.content_visible and not visible:
            self._print(self._style("  (list is empty)", _DIM))
        self.content_visible = visible

    def _render_toggle_all(self, payload: dict[str, bool]) -> None:
        self.toggle_all_checked = bool(payload.get("checked"))

    def _render_clear_completed_button(self, payload: dict[str, Any]) -> None:
        if payload.get("visible"):
            self._print(self._style(f"  /clear removes {payload.get('completed', 0)} completed", _DIM))

    def _render_set_filter(self, token: str) -> None:
        self.filter_token = token or ""
        links = []
        for link_token, label in FILTER_LINKS:
            if link_token == self.filter_token:
                links.append(self._style(f"*{label}*", _BOLD))
            else:
                links.append(label)
        self._print("  filter: " + " | ".join(links))

    def _render_element_complete(self, payload: dict[str, Any]) -> None:
        mark = "[x]" if payload.get("completed") else "[ ]"
        self._print(f"  {mark} #{payload.get('id')}")

    def _render_edit_item(self, payload: dict[str, Any]) -> None:
        task_id = payload.get("id")
        self.editing.add(task_id)
        self._print(
            f"  editing #{task_id}: {payload.get('title', '')}"
            f"  (/save {task_id} <title> or /cancel {task_id})"
        )

    def _render_edit_item_done(self, payload: dict[str, Any]) -> None:
        task_id = payload.get("id")
        self.editing.discard(task_id)
        self._print(f"  #{task_id}: {payload.get('title', '')}")

    def _render_clear_new_todo(self, payload: Any) -> None:
        # The console prompt is already empty once a line was submitted.
        return
