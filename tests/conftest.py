# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_controller.core.controller import Controller
from todo_controller.core.models import Task

from .fakes import FakeTaskRepo, FakeView


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        store_backend="memory",
        data_dir=tmp_path / "data",
        db_path=tmp_path / "data" / "todos.sqlite3",
        initial_route="",
        console_color=False,
    )


@pytest.fixture()
def view() -> FakeView:
    return FakeView()


@pytest.fixture()
def make_controller(view: FakeView):
    """Build a controller over a FakeTaskRepo seeded with the given tasks."""

    def _make(tasks: list[Task] | None = None, **kwargs) -> tuple[Controller, FakeTaskRepo]:
        store = FakeTaskRepo(tasks, **kwargs)
        return Controller(store, view), store

    return _make
