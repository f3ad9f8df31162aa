# src/task_calendar/views/calendar_view.py

from __future__ import annotations

import functools
from datetime import date

from ..tasks.date_keys import date_key, date_key_for, days_in_month, month_grid, shift_month
from ..tasks.task_manager import TaskManager
from ..tasks.task_models import DayStatus
from .editors import DayTaskEditor

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

STATUS_MARKS = {
    DayStatus.COMPLETED: "✓",
    DayStatus.INCOMPLETE: "◐",
    DayStatus.EMPTY: " ",
}


class CalendarView:
    """
    Month calendar.

    Day statuses come from the manager's cache and are recomputed on every
    render. Only today is fetched up front; other days are fetched when opened.
    """

    def __init__(self, manager: TaskManager, *, today: date | None = None) -> None:
        self._manager = manager
        self.today = today or date.today()
        self.year = self.today.year
        self.month0 = self.today.month - 1

    def prev_month(self) -> None:
        self.year, self.month0 = shift_month(self.year, self.month0, -1)

    def next_month(self) -> None:
        self.year, self.month0 = shift_month(self.year, self.month0, 1)

    def go_to_today(self) -> None:
        self.year, self.month0 = self.today.year, self.today.month - 1

    async def load_today(self) -> None:
        await self._manager.fetch_tasks(date_key_for(self.today))

    async def open_day(self, day: int) -> DayTaskEditor:
        last = days_in_month(self.year, self.month0)
        if not 1 <= day <= last:
            raise ValueError(f"day must be between 1 and {last}")
        key = date_key(day, self.month0, self.year)
        tasks = await self._manager.fetch_tasks(key)
        return DayTaskEditor(key, tasks, functools.partial(self._manager.save_tasks, key))

    def status_of(self, day: int) -> DayStatus:
        return self._manager.day_status(date_key(day, self.month0, self.year))

    def is_today(self, day: int) -> bool:
        return (self.year, self.month0 + 1, day) == (self.today.year, self.today.month, self.today.day)

    def render(self) -> str:
        title = f"{date(self.year, self.month0 + 1, 1):%B} {self.year}"
        lines = [title.center(7 * 5).rstrip(), "".join(f"{n:^5}" for n in DAY_NAMES).rstrip()]

        for week in month_grid(self.year, self.month0):
            cells = []
            for day in week:
                if day is None:
                    cells.append(" " * 5)
                    continue
                body = f"{day:>2}{STATUS_MARKS[self.status_of(day)]}"
                cells.append(f"[{body}]" if self.is_today(day) else f" {body} ")
            lines.append("".join(cells).rstrip())

        lines.append("✓ completed   ◐ incomplete   [ ] today")
        return "\n".join(lines)
