# src/task_calendar/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import cast

from ..core.result import Err
from ..core.state import AppState, Page
from ..views.editors import DefaultTasksView, TaskListEditor

CommandEmitter = Callable[[str], None]
CommandReply = str | Awaitable[str]
CommandHandler2 = Callable[[AppState, list[str]], CommandReply]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], CommandReply]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

# Commands that work without the session flag.
PUBLIC_COMMANDS = frozenset({"help", "h", "?", "login"})

NO_OPEN_LIST = "Open a list first: /day N or /defaults."


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /day, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

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

    async def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
        *,
        require_login: bool = False,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        Handlers may be plain functions or coroutines.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if require_login and name not in PUBLIC_COMMANDS and not state.logged_in:
            return "You are logged out. Use /login first."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            reply = h3(state, args, emit)
        else:
            h2 = cast(CommandHandler2, handler)
            reply = h2(state, args)

        if inspect.isawaitable(reply):
            reply = await reply
        return reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_int(args: list[str], usage: str) -> int:
    if not args:
        raise ValueError(usage)
    try:
        return int(args[0])
    except ValueError:
        raise ValueError(usage) from None


def _parse_index(args: list[str], usage: str) -> int:
    """1-based CLI index -> 0-based list index."""
    return _parse_int(args, usage) - 1


def _say(emit: CommandEmitter | None, text: str) -> None:
    if emit:
        with contextlib.suppress(Exception):
            emit(text)


def _with_write_note(editor: TaskListEditor) -> str:
    """Render the open list; a failed optimistic save only gets a note."""
    text = editor.render()
    result = editor.last_result
    if isinstance(result, Err):
        text += f"\n(not saved to server: {result.kind.value})"
    return text


def _show_calendar(state: AppState) -> str:
    state.page = Page.CALENDAR
    state.editor = None
    return state.calendar.render()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    editing = state.editor.title if state.editor is not None else "nothing"
    return (
        "Status:\n"
        f"  Logged in: {'yes' if state.logged_in else 'no'}\n"
        f"  Page: {state.page.value}\n"
        f"  Editing: {editing}\n"
        f"  API: {getattr(settings, 'api_url', '?')} (user {getattr(settings, 'user_id', '?')})\n"
        f"  Cached days: {len(state.manager.cache)}\n"
        f"  Pending background writes: {state.manager.client.pending_writes}"
    )


async def cmd_login(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if state.logged_in:
        return "Already logged in."
    state.session.log_in()
    _say(emit, "Logged in. Loading today's tasks...")
    await state.calendar.load_today()
    return _show_calendar(state)


def cmd_logout(state: AppState, args: list[str]) -> str:
    state.session.log_out()
    _show_calendar(state)
    return "Logged out."


def cmd_calendar(state: AppState, args: list[str]) -> str:
    return _show_calendar(state)


def cmd_month(state: AppState, args: list[str]) -> str:
    """
    /month        -> show current month
    /month prev   -> previous month
    /month next   -> next month
    """
    if args:
        sub = args[0].lower()
        if sub in ("prev", "p", "-"):
            state.calendar.prev_month()
        elif sub in ("next", "n", "+"):
            state.calendar.next_month()
        else:
            return "Usage: /month [prev|next]"
    return _show_calendar(state)


def cmd_today(state: AppState, args: list[str]) -> str:
    state.calendar.go_to_today()
    return _show_calendar(state)


async def cmd_day(state: AppState, args: list[str]) -> str:
    try:
        day = _parse_int(args, "Usage: /day N (day of the shown month)")
        editor = await state.calendar.open_day(day)
    except ValueError as e:
        return str(e)
    state.page = Page.CALENDAR
    state.editor = editor
    return editor.render()


async def cmd_defaults(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    _say(emit, "Loading default tasks...")
    view = DefaultTasksView(state.manager)
    await view.load()
    state.page = Page.DEFAULTS
    state.editor = view
    return view.render()


def cmd_show(state: AppState, args: list[str]) -> str:
    if state.editor is not None:
        return state.editor.render()
    return state.calendar.render()


async def cmd_add(state: AppState, args: list[str]) -> str:
    editor = state.editor
    if editor is None:
        return NO_OPEN_LIST
    if not await editor.add_task(" ".join(args)):
        return "Usage: /add TEXT (task text cannot be empty)"
    return _with_write_note(editor)


async def cmd_toggle(state: AppState, args: list[str]) -> str:
    editor = state.editor
    if editor is None:
        return NO_OPEN_LIST
    try:
        await editor.toggle_task(_parse_index(args, "Usage: /toggle N"))
    except (ValueError, IndexError) as e:
        return str(e)
    return _with_write_note(editor)


async def cmd_delete(state: AppState, args: list[str]) -> str:
    editor = state.editor
    if editor is None:
        return NO_OPEN_LIST
    try:
        await editor.delete_task(_parse_index(args, "Usage: /del N"))
    except (ValueError, IndexError) as e:
        return str(e)
    return _with_write_note(editor)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show session, API and cache status.")
registry.register("login", cmd_login, help_text="Log in (local flag only).")
registry.register("logout", cmd_logout, help_text="Log out.")
registry.register("calendar", cmd_calendar, help_text="Show the month calendar.", aliases=["cal"])
registry.register("month", cmd_month, help_text="Navigate months: /month prev | /month next.")
registry.register("today", cmd_today, help_text="Jump back to the current month.")
registry.register("day", cmd_day, help_text="Open a day's tasks: /day N.")
registry.register("defaults", cmd_defaults, help_text="Edit the shared default tasks.")
registry.register("show", cmd_show, help_text="Show the open list (or the calendar).", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task to the open list: /add TEXT.")
registry.register("toggle", cmd_toggle, help_text="Toggle task done: /toggle N.", aliases=["done"])
registry.register("del", cmd_delete, help_text="Delete a task: /del N.", aliases=["rm"])
