# tests/test_commands.py

from __future__ import annotations

import io

import pytest

from todo_controller.cli.bootstrap import create_initial_state
from todo_controller.cli.commands import CommandRegistry, registry
from todo_controller.core.models import Task, TaskCounts
from todo_controller.stores import InMemoryTaskStore


@pytest.fixture()
def app(settings):
    out = io.StringIO()
    store = InMemoryTaskStore([Task(id=1, title="buy milk"), Task(id=2, title="walk dog", completed=True)])
    state = create_initial_state(settings=settings, store=store, out=out)
    return state, out


@pytest.mark.asyncio
async def test_command_registry_unknown_and_blank(app) -> None:
    state, _ = app
    reg = CommandRegistry()

    assert await reg.handle(state, "   ") is None
    assert await reg.handle(state, "hello") is None
    assert "Unknown command" in (await reg.handle(state, "/nope") or "")


@pytest.mark.asyncio
async def test_plain_line_adds_a_todo(app) -> None:
    state, out = app

    assert await registry.handle(state, "call mom") is None

    titles = [t.title for t in await state.store.read()]
    assert titles == ["buy milk", "walk dog", "call mom"]
    assert "call mom" in out.getvalue()


@pytest.mark.asyncio
async def test_done_undo_and_clear(app) -> None:
    state, out = app

    await registry.handle(state, "/done 1")
    assert await state.store.get_count() == TaskCounts(active=0, completed=2, total=2)
    assert state.view.toggle_all_checked is True

    await registry.handle(state, "/undo 2")
    assert await state.store.get_count() == TaskCounts(active=1, completed=1, total=2)

    await registry.handle(state, "/clear")
    assert [t.id for t in await state.store.read()] == [2]
    assert "removed #1" in out.getvalue()


@pytest.mark.asyncio
async def test_edit_save_and_cancel(app) -> None:
    state, out = app

    await registry.handle(state, "/edit 1")
    assert 1 in state.view.editing
    assert "editing #1: buy milk" in out.getvalue()

    await registry.handle(state, "/cancel 1")
    assert 1 not in state.view.editing

    await registry.handle(state, "/save 1 buy oat milk")
    assert (await state.store.read())[0].title == "buy oat milk"

    # An empty title on save deletes.
    await registry.handle(state, "/save 1")
    assert [t.id for t in await state.store.read()] == [2]


@pytest.mark.asyncio
async def test_toggleall_without_argument_flips_checkbox(app) -> None:
    state, _ = app
    await state.controller.set_view("")
    assert state.view.toggle_all_checked is False

    await registry.handle(state, "/toggleall")
    assert await state.store.get_count() == TaskCounts(active=0, completed=2, total=2)

    await registry.handle(state, "/toggleall")
    assert await state.store.get_count() == TaskCounts(active=2, completed=0, total=2)


@pytest.mark.asyncio
async def test_navigation_commands_highlight_filter(app) -> None:
    state, out = app

    await registry.handle(state, "/active")
    assert state.view.filter_token == "active"
    assert state.controller.route.token == "active"

    await registry.handle(state, "/route #/whatever")
    assert state.view.filter_token == ""
    assert "filter: *All* | Active | Completed" in out.getvalue()


@pytest.mark.asyncio
@pytest.mark.parametrize("line", ["/done", "/done abc", "/rm", "/edit x", "/save", "/toggleall maybe", "/add"])
async def test_bad_arguments_return_usage(app, line: str) -> None:
    state, _ = app

    reply = await registry.handle(state, line)

    assert reply is not None and reply.startswith("Usage:")
    assert await state.store.get_count() == TaskCounts(active=1, completed=1, total=2)


@pytest.mark.asyncio
async def test_help_lists_commands(app) -> None:
    state, _ = app

    reply = await registry.handle(state, "/help") or ""

    assert "/add" in reply and "/toggleall" in reply and "/exit" in reply
