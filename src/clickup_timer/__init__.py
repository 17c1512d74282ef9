"""ClickUp timer helper package."""

__version__ = "0.1.0"

from .app import execute_command, format_cli_output, run, run_async
from .client import (
    ApiError,
    ClickUpClient,
    ClickUpError,
    NoTeamsError,
    ResponseDecodeError,
)
from .config import ConfigError, RuntimeSettings, load_settings
from .resolver import TaskNotFoundError, TaskSwitchResolver
from .schemas import Task, Team, TimeEntry, User
from .types import CommandResult

__all__ = [
    "ApiError",
    "ClickUpClient",
    "ClickUpError",
    "CommandResult",
    "ConfigError",
    "NoTeamsError",
    "ResponseDecodeError",
    "RuntimeSettings",
    "Task",
    "TaskNotFoundError",
    "TaskSwitchResolver",
    "Team",
    "TimeEntry",
    "User",
    "execute_command",
    "format_cli_output",
    "load_settings",
    "run",
    "run_async",
]
