# src/task_calendar/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (HTTP store/client/cache/manager/views),
- closes what it opened on shutdown.
"""

from __future__ import annotations

import logging
from datetime import date

import httpx

from ..config import get_settings
from ..core.state import AppState
from ..session import SessionFlag
from ..tasks.task_cache import TaskCache
from ..tasks.task_client import TaskClient
from ..tasks.task_manager import TaskManager
from ..tasks.task_store import RemoteTaskStore
from ..views.calendar_view import CalendarView

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.session_path.parent.mkdir(parents=True, exist_ok=True)


def make_http_client(settings) -> httpx.AsyncClient:
    connect_s = float(settings.http_connect_timeout)
    read_s = float(settings.http_read_timeout)
    timeout = httpx.Timeout(connect=connect_s, read=read_s, write=10.0, pool=connect_s)
    return httpx.AsyncClient(timeout=timeout, headers={"Accept": "application/json"})


def create_initial_state(
    *,
    settings=None,
    http: httpx.AsyncClient | None = None,
    today: date | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the HTTP client) injectable makes the app easier to test
    and avoids hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if http is None:
        http = make_http_client(settings)

    store = RemoteTaskStore(http, api_url=settings.api_url, user_id=settings.user_id)
    client = TaskClient(store, shared_defaults_key=settings.shared_defaults_key)
    manager = TaskManager(client, TaskCache())

    return AppState(
        settings=settings,
        manager=manager,
        session=SessionFlag(settings.session_path),
        calendar=CalendarView(manager, today=today),
        http=http,
    )


async def shutdown_state(state: AppState) -> None:
    """Best-effort shutdown: flush background writes, then close the HTTP client."""
    try:
        await state.manager.aclose()
    except Exception:
        logger.exception("Failed to flush pending writes.")

    if state.http is not None:
        try:
            await state.http.aclose()
        except Exception:
            logger.debug("HTTP client close failed.", exc_info=True)
