# src/todo_controller/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


async def run_console_loop(
    state: AppState,
    *,
    registry: CommandRegistry = command_registry,
    read_line=input,
) -> None:
    """
    Interactive loop: one line in, zero or more render lines out.

    `read_line` blocks, so it runs in a worker thread.
    """
    logger.info("Console connector started (route=%r).", state.settings.initial_route)
    print(f"[{_ts_local()}] [CONSOLE] Type a todo to add it. Use /help for commands, /exit to quit.\n")

    await state.controller.set_view(state.settings.initial_route)

    while True:
        try:
            line = await asyncio.to_thread(read_line, "> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break

        line = line.strip()
        if not line:
            continue

        if line.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = await registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(f"[{_ts_local()}] {reply}")

    logger.info("Console connector finished.")
