# src/todo_controller/stores/__init__.py

from __future__ import annotations

import logging

from ..core.ports import TaskRepo
from .memory import InMemoryTaskStore
from .sqlite import SqliteTaskStore

logger = logging.getLogger(__name__)

__all__ = ["InMemoryTaskStore", "SqliteTaskStore", "build_task_store"]


def build_task_store(settings) -> TaskRepo:
    """Pick the store backend named by settings.store_backend."""
    backend = str(getattr(settings, "store_backend", "sqlite")).strip().lower()
    if backend == "memory":
        return InMemoryTaskStore()
    if backend != "sqlite":
        logger.warning("Unknown store backend %r, using sqlite", backend)
    return SqliteTaskStore(settings.db_path)
