# tasks/task_cache.py

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .task_models import Task


class TaskCache:
    """
    In-memory DateKey -> resolved task list.

    Lives for one session: no eviction, no TTL, no size bound.
    Owned by the composing layer and passed in explicitly.
    """

    def __init__(self) -> None:
        self._entries: dict[str, list[Task]] = {}

    def get(self, key: str) -> list[Task] | None:
        tasks = self._entries.get(key)
        return None if tasks is None else list(tasks)

    def put(self, key: str, tasks: Sequence[Task]) -> None:
        self._entries[key] = list(tasks)

    def clear_all(self) -> None:
        self._entries.clear()

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))
