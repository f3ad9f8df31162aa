# tests/test_commands.py

from __future__ import annotations

import pytest

from task_calendar.cli.commands import CommandRegistry
from task_calendar.cli.console import handle_line
from task_calendar.core.state import AppState, Page
from task_calendar.tasks.task_models import SHARED_DEFAULT_TASKS_KEY, DayStatus, Task

from .fakes import FakeTaskStore


@pytest.mark.asyncio
async def test_command_registry_routes_sync_async_and_emit(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}
    notes: list[str] = []

    def h2(state, args):
        called["h2"] += 1
        return "h2:" + ",".join(args)

    async def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert await reg.handle(state, "/a x y") == "h2:x,y"
    assert await reg.handle(state, "/BEE", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


@pytest.mark.asyncio
async def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert await reg.handle(state, "hello") is None
    assert "Unknown command" in (await reg.handle(state, "/nope") or "")
    assert "Empty command" in (await reg.handle(state, "/") or "")


@pytest.mark.asyncio
async def test_logged_out_only_allows_public_commands(state: AppState) -> None:
    assert "logged out" in (await handle_line(state, "/day 5") or "")
    assert "logged out" in (await handle_line(state, "buy milk") or "")
    assert "Available commands" in (await handle_line(state, "/help") or "")


@pytest.mark.asyncio
async def test_day_editing_session(state: AppState, store: FakeTaskStore) -> None:
    store.data[SHARED_DEFAULT_TASKS_KEY] = [Task("Workout")]

    reply = await handle_line(state, "/login")
    assert reply is not None and "April 2024" in reply
    assert state.logged_in
    # Let the background initialize of today's key land before editing it.
    await state.manager.client.drain()
    assert store.data["5-3-2024"] == []

    reply = await handle_line(state, "/day 5")
    assert reply is not None and "Tasks for Friday, April 5" in reply

    reply = await handle_line(state, "Read a book")
    assert reply is not None and "2. [ ] Read a book" in reply

    await handle_line(state, "/toggle 1")
    reply = await handle_line(state, "/toggle 2")
    assert reply is not None and "Progress: 2/2" in reply
    assert state.manager.day_status("5-3-2024") is DayStatus.COMPLETED
    assert store.data["5-3-2024"] == [Task("Read a book", done=True)]

    assert "no task #9" in (await handle_line(state, "/del 9") or "")
    assert "Usage: /toggle N" in (await handle_line(state, "/toggle x") or "")

    reply = await handle_line(state, "/calendar")
    assert reply is not None and " 5✓" in reply
    assert state.editor is None

    await state.manager.aclose()


@pytest.mark.asyncio
async def test_defaults_page_and_failed_write_note(state: AppState, store: FakeTaskStore) -> None:
    await handle_line(state, "/login")
    reply = await handle_line(state, "/defaults")
    assert state.page is Page.DEFAULTS
    assert reply is not None and "LeetCode" in reply

    store.fail_writes = True
    reply = await handle_line(state, "/add Meditate")
    assert reply is not None
    assert "Meditate" in reply
    assert "not saved to server: network_failure" in reply

    assert "Logged out." == await handle_line(state, "/logout")
    assert state.editor is None
    assert not state.logged_in

    await state.manager.aclose()


@pytest.mark.asyncio
async def test_month_navigation_and_status(state: AppState) -> None:
    await handle_line(state, "/login")
    assert "May 2024" in (await handle_line(state, "/month next") or "")
    assert "Usage" in (await handle_line(state, "/month sideways") or "")
    assert "April 2024" in (await handle_line(state, "/today") or "")
    assert "day must be between 1 and 30" in (await handle_line(state, "/day 31") or "")

    status = await handle_line(state, "/status")
    assert status is not None
    assert "Logged in: yes" in status
    assert "Cached days: 1" in status

    await state.manager.aclose()


@pytest.mark.asyncio
async def test_edit_commands_without_open_list(state: AppState) -> None:
    await handle_line(state, "/login")
    assert state.editor is None
    for line in ("/add Read", "/toggle 1", "/del 1"):
        assert "Open a list first" in (await handle_line(state, line) or "")
    await state.manager.aclose()
