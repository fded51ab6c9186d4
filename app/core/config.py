"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Golf Practice Log"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Golf Practice Log contributors"]
    PROJECT_URL: str = ""

    DEBUG: bool = False

    # Database (single-tenant, local file by default)
    DATABASE_URL: str = "sqlite:///./practice_log.db"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Dashboard defaults ("all" or a positive integer)
    DEFAULT_WINDOW: str = "all"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
