# tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from ..core.result import Err, ErrorKind, Ok
from .task_models import Task

logger = logging.getLogger(__name__)


class RemoteTaskStore:
    """
    REST task store.

    One resource, addressed by user id and key:
    - GET  {api_url}/{user_id}/{key}  -> {"tasks": [...]}
    - POST {api_url} {"userId", "date", "tasks"} replaces the list for key

    The shared-defaults list is stored under a reserved key and is
    treated as just another `date` value.

    Transport problems never raise: every call returns Ok(...) or Err(kind).
    The httpx client is owned by the caller (composition root).
    """

    def __init__(self, http: httpx.AsyncClient, *, api_url: str, user_id: str) -> None:
        if not api_url or not api_url.strip():
            raise ValueError("api_url is required")
        if not user_id or not str(user_id).strip():
            raise ValueError("user_id is required")
        self._http = http
        self._api_url = api_url.rstrip("/")
        self._user_id = str(user_id).strip()
        logger.info("RemoteTaskStore ready api_url=%s user_id=%s", self._api_url, self._user_id)

    # ---- low-level helpers ----

    def _read_url(self, key: str) -> str:
        return f"{self._api_url}/{self._user_id}/{key}"

    @staticmethod
    def _parse_tasks(payload: Any, key: str) -> list[Task]:
        if not isinstance(payload, dict):
            return []
        raw_tasks = payload.get("tasks")
        if not isinstance(raw_tasks, list):
            return []

        tasks: list[Task] = []
        for raw in raw_tasks:
            try:
                tasks.append(Task.from_dict(raw))
            except ValueError as e:
                logger.warning("Skipping malformed task key=%s: %s", key, e)
        return tasks

    # ---- public API ----

    async def read_tasks(self, key: str) -> Ok[list[Task]] | Err:
        try:
            resp = await self._http.get(self._read_url(key))
        except httpx.HTTPError as e:
            logger.warning("Fetch failed key=%s: %r", key, e)
            return Err(ErrorKind.NETWORK_FAILURE, str(e))

        if resp.status_code >= 500:
            logger.warning("Fetch failed key=%s status=%s", key, resp.status_code)
            return Err(ErrorKind.NETWORK_FAILURE, f"HTTP {resp.status_code}")

        try:
            payload = resp.json()
        except ValueError as e:
            logger.warning("Fetch returned unparseable body key=%s status=%s", key, resp.status_code)
            return Err(ErrorKind.NETWORK_FAILURE, f"invalid JSON: {e}")

        tasks = self._parse_tasks(payload, key)
        if not tasks:
            logger.debug("No tasks stored key=%s status=%s", key, resp.status_code)
            return Err(ErrorKind.EMPTY_RESULT)

        logger.debug("Fetched key=%s count=%d", key, len(tasks))
        return Ok(tasks)

    async def replace_tasks(self, key: str, tasks: Sequence[Task]) -> Ok[None] | Err:
        body = {
            "userId": self._user_id,
            "date": key,
            "tasks": [t.to_dict() for t in tasks],
        }
        try:
            resp = await self._http.post(self._api_url, json=body)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Save failed key=%s: %r", key, e)
            return Err(ErrorKind.NETWORK_FAILURE, str(e))

        logger.debug("Saved key=%s count=%d", key, len(tasks))
        return Ok(None)
