"""
Configuration helpers for the pet catalog.

Routers, services and the storage layer read settings through
``get_settings()`` instead of touching os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    content_authority: str
    log_level: str
    sql_echo: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///shelter.db").strip(),
        content_authority=(os.getenv("PETS_CONTENT_AUTHORITY") or "com.example.android.pets").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        sql_echo=_bool(os.getenv("SQL_ECHO"), False),
    )
