# src/task_calendar/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task client and views depend on Protocols instead of concrete implementations.
This keeps the HTTP store swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task
from .result import Err, Ok


class TaskStorePort(Protocol):
    """
    Remote task store: one resource addressed by (user, key).

    - read_tasks: Ok(non-empty list) | Err(EMPTY_RESULT) | Err(NETWORK_FAILURE)
    - replace_tasks: Ok(None) | Err(NETWORK_FAILURE)
    """

    async def read_tasks(self, key: str) -> Ok[list[Task]] | Err: ...

    async def replace_tasks(self, key: str, tasks: Sequence[Task]) -> Ok[None] | Err: ...


class SessionPort(Protocol):
    """Local "logged in" flag."""

    def is_logged_in(self) -> bool: ...
    def log_in(self) -> None: ...
    def log_out(self) -> None: ...
