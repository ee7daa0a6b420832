"""Service configuration, read from the environment or a ``.env`` file.

Every setting can be overridden with a ``CATALOG_`` prefixed variable,
e.g. ``CATALOG_DATABASE_URL=postgresql+psycopg://...``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # Application
    service_name: str = "product-catalog"
    environment: str = "dev"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8000

    # Database
    database_url: str = "sqlite:///./catalog.db"
    db_echo: bool = False
    create_schema: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
