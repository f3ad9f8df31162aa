# src/task_calendar/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import httpx

from ..tasks.task_manager import TaskManager
from ..views.calendar_view import CalendarView
from ..views.editors import TaskListEditor
from .ports import SessionPort


class Page(StrEnum):
    CALENDAR = "calendar"
    DEFAULTS = "defaults"


@dataclass
class AppState:
    # Settings object (real Settings or a test namespace).
    settings: Any

    manager: TaskManager
    session: SessionPort
    calendar: CalendarView

    page: Page = Page.CALENDAR
    # The list currently being edited (a day or the default tasks), if any.
    editor: TaskListEditor | None = None

    # Owned by the composition root; closed on shutdown.
    http: httpx.AsyncClient | None = None

    @property
    def logged_in(self) -> bool:
        return self.session.is_logged_in()
