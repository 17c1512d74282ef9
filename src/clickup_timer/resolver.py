"""Decide which task a switch-style command should start a timer on."""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from .client import ClickUpError
from .logging import get_logger, log_event
from .schemas import Task, TimeEntry

LOGGER = get_logger("resolver")


class TaskNotFoundError(ClickUpError):
    """Raised when no task qualifies for a query. An expected outcome, not a fault."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"No task found for '{query}'")


class TaskSource(Protocol):
    async def search_tasks(self, query: str) -> List[Task]: ...

    async def get_recent_time_entries(self) -> List[TimeEntry]: ...

    async def get_running_timer(self) -> Optional[TimeEntry]: ...


class TaskSwitchResolver:
    """Resolves user intent to a task; the caller starts the timer."""

    def __init__(self, client: TaskSource) -> None:
        self._client = client

    async def resolve_by_name(self, query: str) -> Task:
        """Prefer an exact case-insensitive name match, else the first search hit."""

        tasks = await self._client.search_tasks(query)
        if not tasks:
            raise TaskNotFoundError(query)
        wanted = query.lower()
        match = next((task for task in tasks if task.name.lower() == wanted), tasks[0])
        log_event(LOGGER, logging.DEBUG, "resolve.name", query=query, task_id=match.id)
        return match

    async def resolve_by_id(self, query: str) -> Task:
        """Accept only a search hit whose id equals ``query``.

        Unlike :meth:`resolve_by_name` there is no first-result fallback, so a
        loose query never starts a timer on the wrong task.
        """

        tasks = await self._client.search_tasks(query)
        match = next((task for task in tasks if task.id == query), None)
        if match is None:
            raise TaskNotFoundError(query)
        log_event(LOGGER, logging.DEBUG, "resolve.id", query=query, task_id=match.id)
        return match

    async def resolve_previous(self) -> Optional[Task]:
        """Return the most recent task other than the running one, or ``None``."""

        entries = await self._client.get_recent_time_entries()
        running = await self._client.get_running_timer()
        current_task_id = running.task.id if running is not None else None

        for entry in entries:
            if entry.task.id != current_task_id:
                log_event(
                    LOGGER,
                    logging.DEBUG,
                    "resolve.previous",
                    current=current_task_id,
                    task_id=entry.task.id,
                )
                return entry.task
        return None
