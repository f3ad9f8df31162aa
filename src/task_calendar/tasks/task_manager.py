# tasks/task_manager.py

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..core.result import Err, Ok
from .task_cache import TaskCache
from .task_client import TaskClient
from .task_merge import derive_day_status
from .task_models import DayStatus, Task

logger = logging.getLogger(__name__)


class TaskManager:
    """
    Composing layer used by the views.

    Owns:
    - the TaskCache (injected, so views and tests share one explicit instance)
    - the in-memory shared defaults list

    Writes are optimistic: the in-memory state is updated before the store
    call, and a failed write does not roll it back.
    """

    def __init__(self, client: TaskClient, cache: TaskCache | None = None) -> None:
        self.client = client
        self.cache = cache if cache is not None else TaskCache()
        self._shared_defaults: list[Task] | None = None

    @property
    def shared_defaults(self) -> list[Task]:
        return list(self._shared_defaults or [])

    async def fetch_tasks(self, key: str) -> list[Task]:
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        tasks = await self.client.fetch_tasks_for_key(key)
        self.cache.put(key, tasks)
        return list(tasks)

    async def save_tasks(self, key: str, tasks: Sequence[Task]) -> Ok[None] | Err:
        tasks = list(tasks)
        self.cache.put(key, tasks)
        shared = await self._known_shared_defaults()
        return await self.client.save_tasks_for_key(key, tasks, shared_defaults=shared)

    async def fetch_shared_default_tasks(self) -> list[Task]:
        tasks = await self.client.fetch_shared_defaults()
        self._shared_defaults = list(tasks)
        return list(tasks)

    async def save_shared_default_tasks(self, tasks: Sequence[Task]) -> Ok[None] | Err:
        self._shared_defaults = list(tasks)
        result = await self.client.save_shared_defaults(tasks)
        if isinstance(result, Ok):
            # Every merged per-date view depends on the shared defaults.
            dropped = len(self.cache)
            self.cache.clear_all()
            logger.info("Shared defaults changed; cleared %d cached day(s)", dropped)
        return result

    def day_status(self, key: str) -> DayStatus:
        return derive_day_status(self.cache.get(key))

    async def aclose(self) -> None:
        await self.client.drain()

    async def _known_shared_defaults(self) -> list[Task]:
        if self._shared_defaults is None:
            return await self.fetch_shared_default_tasks()
        return list(self._shared_defaults)
