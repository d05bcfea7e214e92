from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Garante que o pacote inventory seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inventory.core import config as core_config  # noqa: E402
from inventory.core.logging_config import SimpleConsoleFormatter, configure_logging  # noqa: E402


@pytest.fixture()
def fresh_settings():
    core_config.get_settings.cache_clear()
    yield core_config.get_settings
    core_config.get_settings.cache_clear()


def test_defaults(fresh_settings, monkeypatch):
    for name in ("APP_ENV", "INVENTORY_FILE", "DATABASE_URL", "LOG_LEVEL", "SQLALCHEMY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = fresh_settings()
    assert settings.app_env == "dev"
    assert settings.inventory_file == "inventory.json"
    assert settings.database_url == ""
    assert settings.log_level == "INFO"
    assert settings.sqlalchemy_log_level == "WARNING"


def test_environment_overrides(fresh_settings, monkeypatch):
    monkeypatch.setenv("APP_ENV", "PROD")
    monkeypatch.setenv("INVENTORY_FILE", " /data/stock.json ")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = fresh_settings()
    assert settings.app_env == "prod"
    assert settings.inventory_file == "/data/stock.json"
    assert settings.log_level == "DEBUG"


def test_configure_logging_installs_console_handler(fresh_settings, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging()
        assert root.level == logging.WARNING
        assert any(isinstance(h.formatter, SimpleConsoleFormatter) for h in root.handlers)
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        sa_logger = logging.getLogger("sqlalchemy.engine")
        sa_logger.handlers.clear()
        sa_logger.propagate = True
        sa_logger.setLevel(logging.NOTSET)


def test_formatter_layout():
    record = logging.LogRecord("inventory.test", logging.INFO, __file__, 1, "saved %d", (3,), None)
    line = SimpleConsoleFormatter().format(record)
    assert line.endswith(" | INFO | inventory.test | saved 3")
