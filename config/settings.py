from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///recipes.db"
    database_echo: bool = False  # Log every SQL statement

    # Logging
    log_level: str = "INFO"

    # UI
    app_title: str = "Recipe Catalog"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
