"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Academy Management System (AMS) API"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = []
    PROJECT_URL: str = ""

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Document store. Left empty here so the app can be imported without a
    # database; DocumentStore refuses to connect until both are set.
    MONGODB_URI: str = ""
    MONGODB_DB: str = ""
    MONGODB_TIMEOUT_MS: int = 5000
    CREATE_INDEXES_ON_STARTUP: bool = True

    # Owner account bootstrap
    OWNER_USERNAME: str = ""
    OWNER_PASSWORD: str = ""
    OWNER_EMAIL: str = ""

    # Security
    SECRET_KEY: str = ""
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Per-process response cache for player and session lookups
    CACHE_TTL_SECONDS: float = 300.0

    # Longest date range a recurring session may be expanded over
    MAX_RECURRENCE_DAYS: int = 366

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
