from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Overrides the home directory the default database path is derived from
    home_dir: Path | None = Field(default=None)
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="MEMORY_",  # MEMORY_HOME_DIR, MEMORY_LOG_LEVEL
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
