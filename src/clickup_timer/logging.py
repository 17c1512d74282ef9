"""Logging setup for the ``clk`` command line."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

LOGGER_NAME = "clickup_timer"
REDACTED = "***"

_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"


class SecretFilter(logging.Filter):
    """Masks registered secrets (the ClickUp API key) in formatted messages."""

    def __init__(self) -> None:
        super().__init__()
        self.secrets: set[str] = set()

    def filter(self, record: logging.LogRecord) -> bool:
        if self.secrets:
            message = record.getMessage()
            for secret in self.secrets:
                message = message.replace(secret, REDACTED)
            record.msg, record.args = message, None
        return True


_secret_filter = SecretFilter()


def _level(value: Optional[str | int], default: int) -> int:
    if value is None:
        return default
    if isinstance(value, int):
        return value
    resolved = logging.getLevelName(value.strip().upper())
    return resolved if isinstance(resolved, int) else default


def configure_logging(
    level: Optional[str | int] = None,
    *,
    log_file: Optional[str | Path] = None,
    file_level: Optional[str | int] = None,
) -> logging.Logger:
    """Route package logs to stderr (WARNING by default) and optionally a file (DEBUG by default).

    Calling it again replaces the handlers installed by the previous call.
    """

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    handlers[0].setLevel(_level(level, logging.WARNING))

    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(_level(file_level, logging.DEBUG))
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(_secret_filter)
        logger.addHandler(handler)

    logger.setLevel(min(handler.level for handler in handlers))
    logger.propagate = False
    return logger


def redact(secret: str) -> None:
    """Never let ``secret`` reach a log handler verbatim."""

    if secret:
        _secret_filter.secrets.add(secret)


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


def log_event(logger: logging.Logger, level: int, event: str, /, **fields: Any) -> None:
    """Emit a structured log entry encoded as JSON."""

    if not logger.isEnabledFor(level):
        return
    logger.log(level, json.dumps({"event": event, **fields}, default=str, sort_keys=True))
