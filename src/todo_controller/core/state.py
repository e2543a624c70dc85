# src/todo_controller/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .controller import Controller
from .ports import TaskRepo

if TYPE_CHECKING:
    from ..connectors.console_view import ConsoleView


@dataclass
class AppState:
    """Wired application objects shared by the CLI and its commands."""

    # Settings object (config.Settings or a test double with the same attributes).
    settings: Any

    store: TaskRepo
    view: ConsoleView
    controller: Controller
