"""Application configuration managed via environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Apex Coaching Backend"
    debug: bool = False
    log_level: str = "INFO"
    opik_enabled: bool = False
    opik_api_key: str | None = None
    opik_project: str = "apex"
    compliance_recent_weeks: int = 4
    momentum_window_weeks: int = 4
    max_import_chars: int = 2_000_000


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()


settings = get_settings()
