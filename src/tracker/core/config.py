from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Tracker"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./tracker.db"
    database_migrations_url: str | None = None  # Falls back to database_url
    database_echo: bool = False

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Only async drivers can back the async engine."""
        if v.startswith("sqlite") and "+aiosqlite" not in v:
            raise ValueError(
                "DATABASE_URL must use the aiosqlite driver, e.g. sqlite+aiosqlite:///./tracker.db"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
