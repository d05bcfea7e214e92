"""
Configuration helpers for the inventory logger.

Exposes a Settings object that reads environment variables (data file
location, SQL database URL, log levels) so that services/scripts do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


DEFAULT_INVENTORY_FILE = "inventory.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    inventory_file: str
    database_url: str
    log_level: str
    sqlalchemy_log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _level(value: str | None, default: str) -> str:
        value = (value or "").strip().upper()
        return value or default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        inventory_file=(os.getenv("INVENTORY_FILE") or "").strip() or DEFAULT_INVENTORY_FILE,
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        log_level=_level(os.getenv("LOG_LEVEL"), "INFO"),
        sqlalchemy_log_level=_level(os.getenv("SQLALCHEMY_LOG_LEVEL"), "WARNING"),
    )
