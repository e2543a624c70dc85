# src/todo_controller/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from ..core.events import (
    ItemEdit,
    ItemEditCancel,
    ItemEditDone,
    ItemRemove,
    ItemToggle,
    NewTodo,
    RemoveCompleted,
    ToggleAll,
    ViewEvent,
)
from ..core.state import AppState

CommandHandler = Callable[[AppState, list[str]], Awaitable[str | None]]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console (/add, /done, /active, ...)."""

    def __init__(self, *, default: str | None = None) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Command that receives plain (non-slash) lines.
        self._default = default

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string, or None when there is nothing to print.
        """
        line = line.strip()
        if not line:
            return None

        if not line.startswith("/"):
            if self._default is None:
                return None
            line = f"/{self._default} {line}"

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("command /%s args=%s", name, args)
        return await handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry(default="add")


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


async def cmd_help(state: AppState, args: list[str]) -> str | None:
    return registry.build_help()


async def cmd_add(state: AppState, args: list[str]) -> str | None:
    if not args:
        return "Usage: /add <title>"
    await state.view.trigger(ViewEvent.NEW_TODO, NewTodo(" ".join(args)))
    return None


async def cmd_done(state: AppState, args: list[str]) -> str | None:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    await state.view.trigger(ViewEvent.ITEM_TOGGLE, ItemToggle(task_id, True))
    return None


async def cmd_undo(state: AppState, args: list[str]) -> str | None:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /undo <id>"
    await state.view.trigger(ViewEvent.ITEM_TOGGLE, ItemToggle(task_id, False))
    return None


async def cmd_rm(state: AppState, args: list[str]) -> str | None:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    await state.view.trigger(ViewEvent.ITEM_REMOVE, ItemRemove(task_id))
    return None


async def cmd_edit(state: AppState, args: list[str]) -> str | None:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id>"
    await state.view.trigger(ViewEvent.ITEM_EDIT, ItemEdit(task_id))
    return None


async def cmd_save(state: AppState, args: list[str]) -> str | None:
    """
    /save <id> <title>  -> rename
    /save <id>          -> empty title, deletes the task
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /save <id> <title>"
    await state.view.trigger(ViewEvent.ITEM_EDIT_DONE, ItemEditDone(task_id, " ".join(args[1:])))
    return None


async def cmd_cancel(state: AppState, args: list[str]) -> str | None:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /cancel <id>"
    await state.view.trigger(ViewEvent.ITEM_EDIT_CANCEL, ItemEditCancel(task_id))
    return None


async def cmd_toggle_all(state: AppState, args: list[str]) -> str | None:
    """
    /toggleall      -> flip based on the current toggle-all checkbox
    /toggleall on   -> mark every listed task completed
    /toggleall off  -> mark every listed task active
    """
    if not args:
        completed = not state.view.toggle_all_checked
    elif args[0].lower() in ("on", "1", "true", "yes"):
        completed = True
    elif args[0].lower() in ("off", "0", "false", "no"):
        completed = False
    else:
        return "Usage: /toggleall [on|off]"
    await state.view.trigger(ViewEvent.TOGGLE_ALL, ToggleAll(completed))
    return None


async def cmd_clear(state: AppState, args: list[str]) -> str | None:
    await state.view.trigger(ViewEvent.REMOVE_COMPLETED, RemoveCompleted())
    return None


async def cmd_all(state: AppState, args: list[str]) -> str | None:
    await state.controller.set_view("#/")
    return None


async def cmd_active(state: AppState, args: list[str]) -> str | None:
    await state.controller.set_view("#/active")
    return None


async def cmd_completed(state: AppState, args: list[str]) -> str | None:
    await state.controller.set_view("#/completed")
    return None


async def cmd_route(state: AppState, args: list[str]) -> str | None:
    await state.controller.set_view(args[0] if args else "")
    return None


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a todo (plain lines are added too).", aliases=["new"])
registry.register("done", cmd_done, help_text="Mark a todo completed: /done <id>.")
registry.register("undo", cmd_undo, help_text="Mark a todo active again: /undo <id>.")
registry.register("rm", cmd_rm, help_text="Remove a todo: /rm <id>.", aliases=["del"])
registry.register("edit", cmd_edit, help_text="Start editing a todo: /edit <id>.")
registry.register("save", cmd_save, help_text="Finish editing: /save <id> <title> (empty title deletes).")
registry.register("cancel", cmd_cancel, help_text="Abandon an edit: /cancel <id>.")
registry.register("toggleall", cmd_toggle_all, help_text="Complete or reopen all listed: /toggleall [on|off].")
registry.register("clear", cmd_clear, help_text="Remove all completed todos.")
registry.register("all", cmd_all, help_text="Show all todos.")
registry.register("active", cmd_active, help_text="Show active todos.")
registry.register("completed", cmd_completed, help_text="Show completed todos.")
registry.register("route", cmd_route, help_text="Navigate to a raw route fragment: /route #/active.")
