# tests/test_task_store.py

from __future__ import annotations

import json

import httpx
import pytest

from task_calendar.core.result import Err, ErrorKind, Ok
from task_calendar.tasks.task_models import Task
from task_calendar.tasks.task_store import RemoteTaskStore

API_URL = "https://tasks.example.test/api/task"


def _store(handler) -> tuple[RemoteTaskStore, httpx.AsyncClient]:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return RemoteTaskStore(http, api_url=API_URL + "/", user_id="u1"), http


@pytest.mark.asyncio
async def test_read_hits_user_and_key_path() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"tasks": [{"text": "Read", "done": True}, {"text": "Walk"}]})

    store, http = _store(handler)
    async with http:
        result = await store.read_tasks("5-3-2024")

    assert isinstance(result, Ok)
    assert result.value == [Task("Read", done=True), Task("Walk", done=False)]
    assert seen[0].method == "GET"
    assert str(seen[0].url) == f"{API_URL}/u1/5-3-2024"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "body"),
    [
        (200, {"tasks": []}),
        (200, {"tasks": None}),
        (200, {}),
        (404, {"message": "not found"}),
        (200, {"tasks": [{"text": ""}, "junk", {"done": True}]}),
    ],
)
async def test_read_without_tasks_is_empty_result(status: int, body: dict) -> None:
    store, http = _store(lambda request: httpx.Response(status, json=body))
    async with http:
        result = await store.read_tasks("5-3-2024")

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.EMPTY_RESULT


@pytest.mark.asyncio
async def test_read_skips_malformed_entries() -> None:
    body = {
        "tasks": [
            {"text": "Read"},
            {"text": "   "},
            42,
            {"text": "Walk", "done": True},
            {"text": "Nap", "done": "false"},
            {"text": "Run", "done": 1},
        ]
    }
    store, http = _store(lambda request: httpx.Response(200, json=body))
    async with http:
        result = await store.read_tasks("5-3-2024")

    assert isinstance(result, Ok)
    assert result.value == [Task("Read"), Task("Walk", done=True), Task("Nap"), Task("Run")]


@pytest.mark.asyncio
async def test_read_failures_are_network_failures() -> None:
    def unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    cases = [
        unreachable,
        lambda request: httpx.Response(503, json={"tasks": [{"text": "Read"}]}),
        lambda request: httpx.Response(200, text="<html>gateway</html>"),
    ]
    for handler in cases:
        store, http = _store(handler)
        async with http:
            result = await store.read_tasks("5-3-2024")
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.NETWORK_FAILURE


@pytest.mark.asyncio
async def test_replace_posts_full_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"ok": True})

    store, http = _store(handler)
    async with http:
        result = await store.replace_tasks("shared_default_tasks", [Task("Workout", done=True)])

    assert isinstance(result, Ok)
    assert seen[0].method == "POST"
    assert str(seen[0].url) == API_URL
    assert json.loads(seen[0].content) == {
        "userId": "u1",
        "date": "shared_default_tasks",
        "tasks": [{"text": "Workout", "done": True}],
    }


@pytest.mark.asyncio
async def test_replace_failures_return_err() -> None:
    def unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    for handler in (unreachable, lambda request: httpx.Response(500, text="boom")):
        store, http = _store(handler)
        async with http:
            result = await store.replace_tasks("5-3-2024", [Task("Read")])
        assert isinstance(result, Err)
        assert result.kind is ErrorKind.NETWORK_FAILURE


def test_store_requires_url_and_user() -> None:
    http = httpx.AsyncClient()
    with pytest.raises(ValueError):
        RemoteTaskStore(http, api_url="", user_id="u1")
    with pytest.raises(ValueError):
        RemoteTaskStore(http, api_url=API_URL, user_id=" ")
