# tests/test_resolver.py

from __future__ import annotations

import pytest

from clickup_timer.client import ApiError
from clickup_timer.resolver import TaskNotFoundError, TaskSwitchResolver

from .fakes import FakeClickUpClient, make_entry, make_task


@pytest.mark.asyncio
async def test_by_name_prefers_exact_case_insensitive_match() -> None:
    fake = FakeClickUpClient(search_results=[make_task("1", "Meetings Weekly"), make_task("2", "meetings")])
    task = await TaskSwitchResolver(fake).resolve_by_name("Meetings")
    assert task.id == "2"
    assert fake.searches == ["Meetings"]


@pytest.mark.asyncio
async def test_by_name_exact_match_in_first_position() -> None:
    fake = FakeClickUpClient(search_results=[make_task("2", "Meetings"), make_task("1", "Meetings Weekly")])
    task = await TaskSwitchResolver(fake).resolve_by_name("Meetings")
    assert task.id == "2"


@pytest.mark.asyncio
async def test_by_name_falls_back_to_first_result() -> None:
    fake = FakeClickUpClient(search_results=[make_task("1", "Standup")])
    task = await TaskSwitchResolver(fake).resolve_by_name("Meetings")
    assert task.id == "1"


@pytest.mark.asyncio
async def test_by_name_without_results_raises() -> None:
    with pytest.raises(TaskNotFoundError) as excinfo:
        await TaskSwitchResolver(FakeClickUpClient()).resolve_by_name("Meetings")
    assert excinfo.value.query == "Meetings"


@pytest.mark.asyncio
async def test_by_id_accepts_exact_id() -> None:
    fake = FakeClickUpClient(search_results=[make_task("9", "Foo")])
    task = await TaskSwitchResolver(fake).resolve_by_id("9")
    assert task.id == "9"


@pytest.mark.asyncio
async def test_by_id_never_falls_back_to_first_result() -> None:
    fake = FakeClickUpClient(search_results=[make_task("9", "Foo")])
    with pytest.raises(TaskNotFoundError):
        await TaskSwitchResolver(fake).resolve_by_id("bar")
    assert fake.started == []


@pytest.mark.asyncio
async def test_previous_skips_running_task() -> None:
    fake = FakeClickUpClient(
        running=make_entry("A", 400),
        recent=[make_entry("A", 300), make_entry("A", 200), make_entry("B", 100)],
    )
    task = await TaskSwitchResolver(fake).resolve_previous()
    assert task is not None
    assert task.id == "B"


@pytest.mark.asyncio
async def test_previous_none_when_history_is_all_current_task() -> None:
    fake = FakeClickUpClient(running=make_entry("A", 400), recent=[make_entry("A", s) for s in (300, 200, 100)])
    assert await TaskSwitchResolver(fake).resolve_previous() is None


@pytest.mark.asyncio
async def test_previous_none_for_empty_history() -> None:
    assert await TaskSwitchResolver(FakeClickUpClient()).resolve_previous() is None


@pytest.mark.asyncio
async def test_previous_without_running_timer_picks_newest() -> None:
    fake = FakeClickUpClient(recent=[make_entry("C", 300), make_entry("B", 200)])
    task = await TaskSwitchResolver(fake).resolve_previous()
    assert task is not None
    assert task.id == "C"


@pytest.mark.asyncio
async def test_api_errors_propagate_unchanged() -> None:
    class FailingClient(FakeClickUpClient):
        async def search_tasks(self, query: str):
            raise ApiError(500, "boom")

    with pytest.raises(ApiError) as excinfo:
        await TaskSwitchResolver(FailingClient()).resolve_by_name("x")
    assert (excinfo.value.status_code, excinfo.value.body) == (500, "boom")
