"""Public entry points for running a ``clk`` command."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from . import commands
from .client import ClickUpClient, ClickUpError
from .config import ConfigError, RuntimeSettings
from .logging import get_logger, log_event
from .types import EXIT_CONFIG, CommandResult, failure

LOGGER = get_logger("app")


async def execute_command(
    client: ClickUpClient,
    settings: RuntimeSettings,
    command: str,
    *,
    query: Optional[str] = None,
    description: Optional[str] = None,
) -> CommandResult:
    """Dispatch ``command`` against an already constructed client."""

    if command == "status":
        return await commands.show_status(client)
    if command == "meetings":
        return await commands.start_meetings(client, settings.meetings_task)
    if command == "tasks":
        return await commands.list_tasks(client)
    if command == "switch":
        if not query:
            return failure("switch requires a task id")
        return await commands.switch_task(client, query, description=description)
    if command == "back":
        return await commands.switch_back(client)
    if command == "stop":
        return await commands.stop_timer(client)
    raise ValueError(f"Unknown command: {command!r}")


async def run_async(
    command: str,
    settings: RuntimeSettings,
    *,
    query: Optional[str] = None,
    description: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> CommandResult:
    """Run one command and convert client failures into an error result."""

    log_event(LOGGER, logging.DEBUG, "command.start", command=command, query=query)
    try:
        async with ClickUpClient.from_settings(settings, transport=transport) as client:
            result = await execute_command(
                client, settings, command, query=query, description=description
            )
    except ConfigError as exc:
        return failure(f"Error: {exc}", exit_code=EXIT_CONFIG)
    except ClickUpError as exc:
        LOGGER.debug("Command %s failed", command, exc_info=True)
        return failure(f"Error: {exc}")
    except httpx.HTTPError as exc:
        LOGGER.debug("Command %s failed", command, exc_info=True)
        return failure(f"Error: {exc.__class__.__name__}: {exc}")

    log_event(LOGGER, logging.DEBUG, "command.finish", command=command, exit_code=result.exit_code)
    return result


def run(
    command: str,
    settings: RuntimeSettings,
    *,
    query: Optional[str] = None,
    description: Optional[str] = None,
) -> CommandResult:
    """Synchronous helper that runs the async command via ``asyncio.run``."""

    return asyncio.run(run_async(command, settings, query=query, description=description))


def format_cli_output(result: CommandResult) -> tuple[str, str]:
    """Return the stdout and stderr text for a command result."""

    out = "\n".join(result.stdout)
    err = "\n".join(result.stderr)
    return out, err
