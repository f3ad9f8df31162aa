# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_calendar.core.state import AppState
from task_calendar.tasks.task_cache import TaskCache
from task_calendar.tasks.task_client import TaskClient
from task_calendar.tasks.task_manager import TaskManager
from task_calendar.tasks.task_models import SHARED_DEFAULT_TASKS_KEY
from task_calendar.views.calendar_view import CalendarView

from .fakes import FakeSession, FakeTaskStore

# Friday, April 5 2024 -> key "5-3-2024"
TODAY = date(2024, 4, 5)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-calendar-test",
        log_level="DEBUG",
        api_url="https://tasks.example.test/api/task",
        user_id="u1",
        shared_defaults_key=SHARED_DEFAULT_TASKS_KEY,
        http_connect_timeout=1.0,
        http_read_timeout=1.0,
        data_dir=tmp_path / "data",
        session_path=tmp_path / "data" / "session.json",
    )


@pytest.fixture()
def store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def client(store: FakeTaskStore) -> TaskClient:
    return TaskClient(store)


@pytest.fixture()
def manager(client: TaskClient) -> TaskManager:
    return TaskManager(client, TaskCache())


@pytest.fixture()
def state(settings: SimpleNamespace, manager: TaskManager) -> AppState:
    """
    AppState wired with deterministic fakes (in-memory store, session flag)
    and a fixed "today".
    """
    return AppState(
        settings=settings,
        manager=manager,
        session=FakeSession(),
        calendar=CalendarView(manager, today=TODAY),
    )
