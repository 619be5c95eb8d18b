"""
Configuration settings for the CinchDB client.

Uses Pydantic Settings to load environment variables for the service
location, HTTP behaviour, logging and the default database key used by the
command line interface.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Service
    base_url: str = Field("https://cinchdb.com", alias="CINCHDB_BASE_URL")
    key_endpoint: str = Field("generatekey.php", alias="CINCHDB_KEY_ENDPOINT")
    database_key: str = Field("", alias="CINCHDB_KEY")

    # Requests
    http_timeout_seconds: float = Field(30.0, alias="CINCHDB_HTTP_TIMEOUT")
    default_limit: int = Field(1_000_000, alias="CINCHDB_DEFAULT_LIMIT")
    encode_values: bool = Field(False, alias="CINCHDB_ENCODE_VALUES")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
