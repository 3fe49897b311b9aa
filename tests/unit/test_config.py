"""Unit tests for settings and logging setup."""

import logging

import pytest

from fastapi_hal.config import HalSettings, get_settings
from fastapi_hal.core.document import HalRespondable
from fastapi_hal.logging import LOGGER_NAME, configure_logging


def test_default_settings():
    settings = HalSettings()

    assert settings.media_type == "application/hal+json"
    assert settings.log_level == "WARNING"
    assert settings.error_detail is False


def test_media_type_from_environment(monkeypatch):
    monkeypatch.setenv("HAL_MEDIA_TYPE", "application/vnd.example+json")
    get_settings.cache_clear()

    respondable = HalRespondable({})

    assert respondable.headers.getlist("content-type") == ["application/vnd.example+json"]


def test_settings_are_cached():
    assert get_settings() is get_settings()


@pytest.fixture
def hal_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


def test_configure_logging_is_idempotent(hal_logger):
    configure_logging("debug")
    configure_logging(logging.INFO)

    named = [h for h in hal_logger.handlers if h.get_name() == LOGGER_NAME]
    assert len(named) == 1
    assert hal_logger.level == logging.INFO


def test_configure_logging_uses_settings(hal_logger, monkeypatch):
    monkeypatch.setenv("HAL_LOG_LEVEL", "error")
    get_settings.cache_clear()

    assert configure_logging() is hal_logger
    assert hal_logger.level == logging.ERROR


def test_finalizing_logs_a_summary(caplog):
    with caplog.at_level(logging.DEBUG, logger="fastapi_hal.core.document"):
        HalRespondable({}).with_link("self", "/").body()

    assert "status=200 relations=1 headers=1" in caplog.text
