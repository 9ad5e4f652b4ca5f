"""Configuration management for AWS resource schemas.

This module handles loading and validating configuration from environment
variables with sensible defaults.
"""

from typing import Optional
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    All settings have sensible defaults for local development. They can be
    overridden via environment variables or a .env file.
    """

    environment: str = Field(
        default="development",
        description="Environment profile (development, staging, production)",
        validation_alias=AliasChoices("ENVIRONMENT", "ENV")
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="LOG_LEVEL"
    )

    # AWS Configuration
    aws_account_id: str = Field(
        default="123456789012",
        description="Account id used when building ARNs locally",
        pattern=r"^\d{12}$",
        validation_alias="AWS_ACCOUNT_ID"
    )
    aws_region: str = Field(
        default="us-east-1",
        description="Default AWS region",
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION")
    )

    # Synthesis Configuration
    apply_environment_defaults: bool = Field(
        default=True,
        description="Merge the environment profile defaults under declared attributes",
        validation_alias="APPLY_ENVIRONMENT_DEFAULTS"
    )

    model_config = SettingsConfigDict(
        env_prefix="",  # No prefix for environment variables
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """
    Get settings.

    Loads settings from environment variables and .env file.

    Returns:
        Settings instance with all configuration values
    """
    return Settings()


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def settings() -> Settings:
    """
    Get the global settings instance.

    Creates the settings instance on first call and caches it.

    Returns:
        Global Settings instance
    """
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next ``settings()`` call reloads them."""
    global _settings
    _settings = None
