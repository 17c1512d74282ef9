# tests/test_config.py

from __future__ import annotations

import logging

import pytest

from clickup_timer.config import API_BASE, ConfigError, load_settings
from clickup_timer.logging import LOGGER_NAME, configure_logging


def test_missing_key_is_config_error() -> None:
    with pytest.raises(ConfigError):
        load_settings()


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("CLICKUP_API_KEY", " pk_env ")
    monkeypatch.setenv("CLICKUP_MEETINGS_TASK", "Standup")
    monkeypatch.setenv("CLICKUP_TIMEOUT", "7.5")

    settings = load_settings()

    assert settings.api_key == "pk_env"
    assert settings.base_url == API_BASE
    assert settings.meetings_task == "Standup"
    assert settings.timeout == 7.5
    assert "pk_env" not in repr(settings)


def test_base_url_override_strips_trailing_slash(monkeypatch) -> None:
    monkeypatch.setenv("CLICKUP_API_BASE", "http://localhost:8080/api/v2/")
    settings = load_settings("pk_arg")
    assert settings.base_url == "http://localhost:8080/api/v2"


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_invalid_timeout(monkeypatch, raw) -> None:
    monkeypatch.setenv("CLICKUP_API_KEY", "pk")
    monkeypatch.setenv("CLICKUP_TIMEOUT", raw)
    with pytest.raises(ConfigError):
        load_settings()


def test_log_file_receives_debug(monkeypatch, tmp_path) -> None:
    log_file = tmp_path / "logs" / "clk.log"
    load_settings("pk", log_level="error", log_file=log_file)

    logger = logging.getLogger(LOGGER_NAME)
    logger.debug("hello file")
    for handler in logger.handlers:
        handler.flush()

    assert "hello file" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()


def test_api_key_never_reaches_log_file(tmp_path) -> None:
    log_file = tmp_path / "clk.log"
    load_settings("pk_secret_987", log_file=log_file)

    logger = logging.getLogger(LOGGER_NAME)
    logger.debug("sending Authorization=%s", "pk_secret_987")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "pk_secret_987" not in text
    assert "Authorization=***" in text
    configure_logging()


def test_reconfiguring_replaces_handlers(tmp_path) -> None:
    configure_logging("info", log_file=tmp_path / "a.log")
    logger = configure_logging("debug")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
