# src/task_calendar/views/editors.py

from __future__ import annotations

"""
Task list editors (the day modal and the default-tasks page).

Editors hold their own copy of the list. Every mutation replaces the list and
hands it to an async `on_update` callback, which persists it.
"""

import logging
from collections.abc import Awaitable, Callable, Sequence
from datetime import date

from ..tasks.date_keys import parse_date_key
from ..tasks.task_manager import TaskManager
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

OnUpdate = Callable[[list[Task]], Awaitable[object]]


class TaskListEditor:
    title = "Tasks"
    empty_hint = "No tasks yet. Add one with /add <text>."

    def __init__(self, tasks: Sequence[Task], on_update: OnUpdate) -> None:
        self._tasks = list(tasks)
        self._on_update = on_update
        # Whatever on_update returned for the latest mutation (Ok / Err for store writes).
        self.last_result: object = None

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def progress(self) -> tuple[int, int]:
        """(completed, total)"""
        return sum(1 for t in self._tasks if t.done), len(self._tasks)

    async def add_task(self, text: str) -> bool:
        """Append a new open task. Blank text is ignored (returns False)."""
        text = (text or "").strip()
        if not text:
            return False
        await self._commit([*self._tasks, Task(text)])
        return True

    async def toggle_task(self, index: int) -> Task:
        self._check_index(index)
        updated = [t.toggled() if i == index else t for i, t in enumerate(self._tasks)]
        await self._commit(updated)
        return updated[index]

    async def delete_task(self, index: int) -> Task:
        self._check_index(index)
        removed = self._tasks[index]
        await self._commit([t for i, t in enumerate(self._tasks) if i != index])
        return removed

    def render(self) -> str:
        done, total = self.progress()
        lines = [self.title]
        if total:
            lines.append(f"Progress: {done}/{total}")
        if not self._tasks:
            lines.append(self.empty_hint)
        for i, t in enumerate(self._tasks, start=1):
            mark = "x" if t.done else " "
            lines.append(f"  {i}. [{mark}] {t.text}")
        return "\n".join(lines)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"no task #{index + 1} (list has {len(self._tasks)})")

    async def _commit(self, tasks: list[Task]) -> None:
        self._tasks = tasks
        self.last_result = await self._on_update(list(tasks))


class DayTaskEditor(TaskListEditor):
    """Task list of one calendar day."""

    def __init__(self, key: str, tasks: Sequence[Task], on_update: OnUpdate) -> None:
        super().__init__(tasks, on_update)
        self.key = key
        day, month0, year = parse_date_key(key)
        d = date(year, month0 + 1, day)
        self.title = f"Tasks for {d:%A}, {d:%B} {d.day}"


class DefaultTasksView(TaskListEditor):
    """Shared default tasks, prepended to every day's list."""

    title = "Default Tasks"
    empty_hint = "No default tasks yet. Add one with /add <text>."

    def __init__(self, manager: TaskManager) -> None:
        super().__init__([], manager.save_shared_default_tasks)
        self._manager = manager

    async def load(self) -> None:
        self._tasks = await self._manager.fetch_shared_default_tasks()
        logger.debug("Loaded %d default task(s)", len(self._tasks))
