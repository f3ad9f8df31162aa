# src/task_calendar/cli/console.py

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from ..core.state import AppState
from .commands import registry as command_registry

logger = logging.getLogger(__name__)

PROMPT = ">>> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


async def handle_line(state: AppState, line: str) -> str | None:
    """
    One console input -> reply text.

    Slash commands go to the registry. Plain text adds a task to the open list.
    """
    line = line.strip()
    if not line:
        return None

    if not line.startswith("/"):
        if not state.logged_in:
            return "You are logged out. Use /login first."
        if state.editor is None:
            return "Open a day (/day N) or the default tasks (/defaults) to add tasks."
        line = f"/add {line}"

    return await command_registry.handle(state, line, emit=_print_ts, require_login=True)


async def run_console_loop(state: AppState) -> None:
    logger.info("Console started (logged_in=%s).", state.logged_in)
    _print_ts("[CONSOLE] Use /help for commands. Use /exit to quit.\n")

    if state.logged_in:
        await state.calendar.load_today()
        print(state.calendar.render(), flush=True)
    else:
        _print_ts("You are logged out. Use /login to start.")

    while True:
        try:
            # Read in a worker thread so background writes keep running meanwhile.
            user_input = (await asyncio.to_thread(input, PROMPT)).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = await handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            print(reply, flush=True)

    logger.info("Console finished.")
