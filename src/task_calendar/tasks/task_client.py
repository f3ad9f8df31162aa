# tasks/task_client.py

from __future__ import annotations

"""
Task client.

Wraps the remote task store and applies the shared-defaults rules:
- a date's resolved list is shared defaults first, then the date's own tasks
  (minus any whose text matches a shared default);
- only the date's own tasks are persisted under the date key.

Two flavours of every read:
- load_*  -> explicit Ok / Err, no degradation
- fetch_* -> always a usable list; any Err degrades to the hardcoded fallback set
"""

import asyncio
import logging
from collections.abc import Sequence

from ..core.ports import TaskStorePort
from ..core.result import Err, ErrorKind, Ok, with_fallback
from .task_merge import merge_with_defaults, split_date_specific
from .task_models import DEFAULT_TASKS, SHARED_DEFAULT_TASKS_KEY, Task

logger = logging.getLogger(__name__)


class TaskClient:
    def __init__(
        self,
        store: TaskStorePort,
        *,
        shared_defaults_key: str = SHARED_DEFAULT_TASKS_KEY,
        fallback_tasks: Sequence[Task] = DEFAULT_TASKS,
    ) -> None:
        self._store = store
        self._shared_key = shared_defaults_key
        self._fallback = tuple(fallback_tasks)
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def shared_defaults_key(self) -> str:
        return self._shared_key

    @property
    def fallback_tasks(self) -> list[Task]:
        return list(self._fallback)

    @property
    def pending_writes(self) -> int:
        return len(self._pending)

    # ---- shared defaults ----

    async def load_shared_defaults(self) -> Ok[list[Task]] | Err:
        return await self._store.read_tasks(self._shared_key)

    async def fetch_shared_defaults(self) -> list[Task]:
        result = await self.load_shared_defaults()
        if isinstance(result, Err):
            logger.info("Shared defaults unavailable (%s); using fallback set", result.kind.value)
        return with_fallback(result, self.fallback_tasks)

    async def save_shared_defaults(self, tasks: Sequence[Task]) -> Ok[None] | Err:
        result = await self._store.replace_tasks(self._shared_key, list(tasks))
        if isinstance(result, Err):
            logger.warning("Saving shared defaults failed: %s %s", result.kind.value, result.detail)
        else:
            logger.info("Saved shared defaults count=%d", len(tasks))
        return result

    # ---- per-date tasks ----

    async def load_tasks_for_key(self, key: str) -> Ok[list[Task]] | Err:
        """
        Resolve the task list for `key`.

        - date read fails           -> Err(NETWORK_FAILURE)
        - date has no stored tasks  -> Ok(copy of shared defaults), and the key
                                       is initialized in the background with
                                       its own subset (no shared texts)
        - otherwise                 -> Ok(shared ++ date-specific without collisions)
        """
        date_result = await self._store.read_tasks(key)
        if isinstance(date_result, Err) and date_result.kind is ErrorKind.NETWORK_FAILURE:
            return date_result

        shared = await self.fetch_shared_defaults()
        date_specific = with_fallback(date_result, [])

        if not date_specific:
            self._schedule_initialize(key, split_date_specific(shared, shared))
            return Ok(list(shared))

        return Ok(merge_with_defaults(shared, date_specific))

    async def fetch_tasks_for_key(self, key: str) -> list[Task]:
        result = await self.load_tasks_for_key(key)
        if isinstance(result, Err):
            logger.info("Tasks for key=%s unavailable (%s); using fallback set", key, result.kind.value)
        return with_fallback(result, self.fallback_tasks)

    async def save_tasks_for_key(
        self,
        key: str,
        tasks: Sequence[Task],
        *,
        shared_defaults: Sequence[Task] | None = None,
    ) -> Ok[None] | Err:
        """
        Persist the date-specific subset of `tasks` under `key`.

        Tasks whose text matches a shared default are not written; the caller
        keeps the full list in its cache. `shared_defaults=None` fetches them.
        """
        if shared_defaults is None:
            shared_defaults = await self.fetch_shared_defaults()

        own = split_date_specific(tasks, shared_defaults)
        result = await self._store.replace_tasks(key, own)
        if isinstance(result, Err):
            logger.warning("Saving tasks failed key=%s: %s %s", key, result.kind.value, result.detail)
        else:
            logger.debug("Saved key=%s own=%d of %d", key, len(own), len(tasks))
        return result

    async def initialize_tasks(self, key: str, tasks: Sequence[Task] | None = None) -> Ok[None] | Err:
        """Best-effort first write for a key that has no stored tasks yet."""
        if tasks is None:
            tasks = self._fallback
        result = await self._store.replace_tasks(key, list(tasks))
        if isinstance(result, Err):
            logger.warning("Initializing tasks failed key=%s: %s %s", key, result.kind.value, result.detail)
        else:
            logger.debug("Initialized key=%s count=%d", key, len(tasks))
        return result

    # ---- background writes ----

    def _schedule_initialize(self, key: str, tasks: Sequence[Task]) -> None:
        task = asyncio.get_running_loop().create_task(
            self._initialize_quietly(key, list(tasks)),
            name=f"initialize-tasks:{key}",
        )
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _initialize_quietly(self, key: str, tasks: list[Task]) -> None:
        try:
            await self.initialize_tasks(key, tasks)
        except Exception:
            logger.exception("initialize_tasks crashed key=%s", key)

    async def drain(self) -> None:
        """Wait for every pending background write."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
