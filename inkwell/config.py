"""Configuration loading for the Inkwell publishing system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Notification configuration
    notification_backend: Literal["stdout", "none"] = Field(
        default="stdout",
        description="Notification backend type ('none' disables notifications)",
    )
    notifications_verbose: bool = Field(
        default=False,
        description="Frame stdout notifications with separator lines",
    )

    # Service logger configuration
    service_logger_name: str = Field(
        default="inkwell.service",
        description="Logger name used by the LoggerPort adapter ('' disables it)",
    )

    # Seed data
    seed_users: list[str] = Field(
        default_factory=list,
        description='Users preloaded into the store, as "name:email" entries',
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("seed_users")
    @classmethod
    def validate_seed_users(cls, v: list[str]) -> list[str]:
        """Ensure every seed entry looks like name:email with both parts set."""
        for entry in v:
            name, sep, email = entry.partition(":")
            if not sep or not name.strip() or not email.strip():
                raise ValueError(
                    f"seed_users entries must look like 'name:email', got {entry!r}"
                )
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
