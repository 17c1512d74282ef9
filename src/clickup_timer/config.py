"""Configuration helpers for the ClickUp timer CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .logging import configure_logging, redact


class ConfigError(ValueError):
    """Raised when runtime configuration is invalid or incomplete."""

API_BASE = "https://api.clickup.com/api/v2"
DEFAULT_MEETINGS_TASK = "Meetings"

API_KEY_ENV_VAR = "CLICKUP_API_KEY"
_API_BASE_ENV_VAR = "CLICKUP_API_BASE"
_MEETINGS_TASK_ENV_VAR = "CLICKUP_MEETINGS_TASK"
_TIMEOUT_ENV_VAR = "CLICKUP_TIMEOUT"
LOG_LEVEL_ENV_VAR = "CLICKUP_LOG_LEVEL"
LOG_FILE_ENV_VAR = "CLICKUP_LOG_FILE"
LOG_FILE_LEVEL_ENV_VAR = "CLICKUP_LOG_FILE_LEVEL"


@dataclass(frozen=True)
class RuntimeSettings:
    """Represents the resolved settings required to talk to ClickUp."""

    api_key: str = field(repr=False)
    base_url: str = API_BASE
    meetings_task: str = DEFAULT_MEETINGS_TASK
    timeout: Optional[float] = None


def load_settings(
    api_key: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    log_level: Optional[str] = None,
    log_file: Optional[str | Path] = None,
    log_file_level: Optional[str] = None,
) -> RuntimeSettings:
    """Resolve runtime settings from provided parameters and environment variables."""

    load_dotenv()  # Allows .env values to fill in the environment
    configure_logging(
        log_level or os.getenv(LOG_LEVEL_ENV_VAR),
        log_file=log_file or os.getenv(LOG_FILE_ENV_VAR),
        file_level=log_file_level or os.getenv(LOG_FILE_LEVEL_ENV_VAR),
    )
    resolved_key = _resolve_api_key(api_key)
    redact(resolved_key)
    resolved_base = (base_url or os.getenv(_API_BASE_ENV_VAR) or API_BASE).rstrip("/")
    meetings_task = os.getenv(_MEETINGS_TASK_ENV_VAR, "").strip() or DEFAULT_MEETINGS_TASK
    return RuntimeSettings(
        api_key=resolved_key,
        base_url=resolved_base,
        meetings_task=meetings_task,
        timeout=_resolve_timeout(),
    )


def _resolve_api_key(cli_value: Optional[str]) -> str:
    key = cli_value if cli_value is not None else os.getenv(API_KEY_ENV_VAR)
    if not key or not key.strip():
        raise ConfigError(f"{API_KEY_ENV_VAR} is not defined in environment variables")
    return key.strip()


def _resolve_timeout() -> Optional[float]:
    env_value = os.getenv(_TIMEOUT_ENV_VAR)
    if not env_value:
        return None
    try:
        parsed = float(env_value)
    except ValueError as exc:
        raise ConfigError(f"Invalid {_TIMEOUT_ENV_VAR} value: {env_value!r}") from exc
    if parsed <= 0:
        raise ConfigError(f"{_TIMEOUT_ENV_VAR} must be greater than zero.")
    return parsed
