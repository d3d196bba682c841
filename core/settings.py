"""
Application settings.

Values are read from environment variables (or a local .env file) once and
cached. Import `settings` for the process-wide instance.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ------------------------------ Service ------------------------------ #
    service_name: str = "gridiron-weather-api"
    log_level: str = "INFO"
    log_format: str = "console"  # "json" in production
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # ----------------------------- Database ----------------------------- #
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "nfl"
    db_user: str = "postgres"
    db_password: str = ""
    db_max_connections: int = 20
    db_stale_timeout: int = 300
    db_timeout: int = 10

    # ----------------------------- Analytics ---------------------------- #
    adverse_weather_categories: list[str] = Field(default_factory=lambda: ["Foggy"])
    default_window_half_width: int = 2
    tier_season_floor: int = 2018


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
