"""Implementations of the ``clk`` sub-commands.

Each command talks to ClickUp through a :class:`~clickup_timer.client.ClickUpClient`
and returns a :class:`~clickup_timer.types.CommandResult`. API failures are
left to propagate; :mod:`clickup_timer.app` turns them into error output.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from .client import ClickUpClient
from .resolver import TaskNotFoundError, TaskSwitchResolver
from .schemas import Task
from .types import CommandResult, failure


def _now_ms() -> int:
    return int(time.time() * 1000)


def format_task_line(task: Task) -> str:
    return f"{task.id} - {task.name} [{task.status.status.upper()}]"


async def show_status(client: ClickUpClient, *, clock: Callable[[], int] = _now_ms) -> CommandResult:
    running = await client.get_running_timer()
    if running is None:
        return CommandResult(stdout=["No active timer found."])
    lines = [f"Currently tracking: [{running.task.name}] ({running.task.url})"]
    if running.start:
        lines.append(f"Duration: {running.elapsed_minutes(clock())} minutes")
    return CommandResult(stdout=lines)


async def list_tasks(client: ClickUpClient) -> CommandResult:
    tasks = await client.get_assigned_tasks()
    if not tasks:
        return CommandResult(stdout=["No assigned tasks found."])
    return CommandResult(stdout=["Assigned Tasks:", *(format_task_line(task) for task in tasks)])


async def _start(client: ClickUpClient, task: Task, lines: list[str], description: Optional[str] = None) -> CommandResult:
    # ClickUp stops whatever timer was running when a new one starts.
    await client.start_timer(task.id, description)
    return CommandResult(stdout=[*lines, f"Timer started for {task.name}"])


async def start_meetings(client: ClickUpClient, task_name: str = "Meetings") -> CommandResult:
    searching = f"Searching for '{task_name}'..."
    try:
        task = await TaskSwitchResolver(client).resolve_by_name(task_name)
    except TaskNotFoundError:
        return failure(f"No task named '{task_name}' found.", stdout=[searching])
    return await _start(client, task, [searching, f"Found: {task.name} ({task.id})"])


async def switch_task(
    client: ClickUpClient,
    query: str,
    *,
    description: Optional[str] = None,
) -> CommandResult:
    try:
        task = await TaskSwitchResolver(client).resolve_by_id(query)
    except TaskNotFoundError as exc:
        return failure(str(exc))
    return await _start(client, task, [f"Found: {task.name} ({task.id})"], description)


async def switch_back(client: ClickUpClient) -> CommandResult:
    task = await TaskSwitchResolver(client).resolve_previous()
    if task is None:
        return CommandResult(stdout=["No previous different task found in recent history."])
    return await _start(client, task, [f"Switching back to: {task.name} ({task.id})"])


async def stop_timer(client: ClickUpClient) -> CommandResult:
    await client.stop_timer()
    return CommandResult(stdout=["Timer stopped."])
