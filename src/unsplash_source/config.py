"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_BASE_URL = "https://source.unsplash.com"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    source_base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
