"""
Configuration Settings

This module defines application configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file.

Design Decisions:
- Uses pydantic-settings for type-safe configuration
- ACCESS_TOKEN_SECRET has no default: a missing secret fails at load time
- Defaults to a local MongoDB for development
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["EnvSettingsOptions", "Settings", "get_settings"]


class EnvSettingsOptions(Enum):
    """Environment options for deployment."""
    production = "production"
    staging = "staging"
    development = "dev"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    ENV_SETTING: EnvSettingsOptions = Field(
        default=EnvSettingsOptions.development,
        description="Environment setting (production, staging, dev)"
    )

    # Document store
    MONGODB_URI: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string (mongodb:// or mongodb+srv://)"
    )
    MONGODB_DATABASE: str = Field(default="washlava", description="Database name")
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = Field(
        default=5000,
        description="How long the driver waits for a reachable server"
    )
    USERS_COLLECTION: str = Field(default="users")
    SERVICES_COLLECTION: str = Field(default="services")
    CARTS_COLLECTION: str = Field(default="carts")
    REVIEWS_COLLECTION: str = Field(default="reviews")

    # Identity tokens
    ACCESS_TOKEN_SECRET: str = Field(..., description="HMAC secret used to sign identity tokens")
    JWT_ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_SECONDS: int = Field(
        default=3600,
        description="Validity window of issued tokens (1 hour)"
    )

    # Orders
    ENFORCE_STATUS_TRANSITIONS: bool = Field(
        default=False,
        description="Reject cart status updates that skip the order lifecycle"
    )

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=5000)
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ALLOW_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
