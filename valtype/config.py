from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VALTYPE_", env_file=".env", extra="ignore")

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console

    # Diagnostics
    REPR_MAX_LENGTH: int = 80  # Rejected values are truncated to this many characters


@lru_cache
def get_settings() -> Settings:
    return Settings()
