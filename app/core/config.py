"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SEED_NAMES = ["Sardor", "Jasur", "Jasur", "Nigora"]


class Settings(BaseSettings):
    # App
    app_name: str = "Transcript Service"
    debug: bool = True
    log_level: str = "INFO"
    port: int = 4001

    # CORS (allow all for development)
    cors_origins: List[str] = ["*"]

    # Seed data loaded into the store on startup (handy for debugging)
    seed_on_startup: bool = True
    seed_names: List[str] = list(DEFAULT_SEED_NAMES)

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
