# src/todo_controller/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the task store, the console view and the controller into AppState.
"""

from __future__ import annotations

import logging
from typing import TextIO

from ..config import get_settings
from ..connectors.console_view import ConsoleView
from ..core.controller import Controller
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..stores import build_task_store

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    store: TaskRepo | None = None,
    out: TextIO | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if store is None:
        _ensure_local_dirs(settings)
        store = build_task_store(settings)

    view = ConsoleView(out=out, color=bool(getattr(settings, "console_color", True)))
    controller = Controller(store, view)

    logger.debug("State wired store=%s", type(store).__name__)
    return AppState(settings=settings, store=store, view=view, controller=controller)
