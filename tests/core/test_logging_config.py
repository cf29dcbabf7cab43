"""
Testes de configuração (logging e settings).

Testa:
  - setup_logging usa o nível informado ou o de Settings
  - renderer JSON fora do modo DEBUG
  - settings de paginação lidas do ambiente
"""

import pytest
from unittest.mock import patch

import structlog

from shared.infrastructure.config.settings import Settings, get_settings
from shared.infrastructure.logging import get_logger, setup_logging
from projects.deepsource.config import DeepSourcePaginationSettings

_LOGGING = "shared.infrastructure.logging.structlog_config"


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def _last_processor():
    return structlog.get_config()["processors"][-1]


def test_setup_logging_json_renderer_by_default():
    setup_logging("INFO")

    assert isinstance(_last_processor(), structlog.processors.JSONRenderer)


def test_setup_logging_console_renderer_on_debug():
    setup_logging("debug")

    assert isinstance(_last_processor(), structlog.dev.ConsoleRenderer)


def test_setup_logging_defaults_to_settings_level():
    with patch(f"{_LOGGING}.get_settings", return_value=Settings(log_level="DEBUG")):
        setup_logging()

    assert isinstance(_last_processor(), structlog.dev.ConsoleRenderer)


def test_setup_logging_reads_level_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    get_settings.cache_clear()
    try:
        setup_logging()
    finally:
        get_settings.cache_clear()

    assert isinstance(_last_processor(), structlog.dev.ConsoleRenderer)


def test_get_logger_returns_bound_logger():
    logger = get_logger(__name__)

    assert hasattr(logger, "info")
    assert hasattr(logger, "warning")


def test_pagination_settings_defaults():
    settings = DeepSourcePaginationSettings()

    assert settings.deepsource_default_page_size == 10
    assert settings.deepsource_multi_page_size == 50
    assert settings.deepsource_default_max_pages == 10


def test_pagination_settings_from_env(monkeypatch):
    monkeypatch.setenv("DEEPSOURCE_MULTI_PAGE_SIZE", "25")

    settings = DeepSourcePaginationSettings()

    assert settings.deepsource_multi_page_size == 25
