"""Process-wide settings for flashlib.

``FlashSettings`` holds values shared by every provider: the fallback
credentials consulted after explicit parameters and provider-specific
environment variables, the log level, and the job polling defaults. Values
are read from ``FLASH_*`` environment variables and an optional ``.env``
file.
"""

import logging
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class FlashSettings(BaseSettings):
    """Shared settings with environment variable support."""

    log_level: str = Field(default="INFO", validation_alias=AliasChoices("FLASH_LOG_LEVEL", "log_level"))

    # Shared credential fallbacks
    exa_api_key: Optional[str] = Field(default=None, validation_alias=AliasChoices("FLASH_EXA_API_KEY", "exa_api_key"))
    hyperbolic_api_key: Optional[str] = Field(default=None, validation_alias=AliasChoices("FLASH_HYPERBOLIC_API_KEY", "hyperbolic_api_key"))
    google_token: Optional[str] = Field(default=None, validation_alias=AliasChoices("FLASH_GOOGLE_TOKEN", "google_token"))
    alchemy_api_key: Optional[str] = Field(default=None, validation_alias=AliasChoices("FLASH_ALCHEMY_API_KEY", "alchemy_api_key"))

    # Job polling
    poll_interval_seconds: float = Field(default=5.0, validation_alias=AliasChoices("FLASH_POLL_INTERVAL_SECONDS", "poll_interval_seconds"))
    poll_max_attempts: int = Field(default=60, validation_alias=AliasChoices("FLASH_POLL_MAX_ATTEMPTS", "poll_max_attempts"))

    # HTTP
    request_timeout_seconds: float = Field(default=60.0, validation_alias=AliasChoices("FLASH_REQUEST_TIMEOUT_SECONDS", "request_timeout_seconds"))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator('poll_max_attempts')
    @classmethod
    def validate_positive_attempts(cls, v):
        if v <= 0:
            raise ValueError("Value must be positive")
        return v

    @field_validator('poll_interval_seconds', 'request_timeout_seconds')
    @classmethod
    def validate_non_negative_seconds(cls, v):
        if v < 0:
            raise ValueError("Value must not be negative")
        return v


_settings: Optional[FlashSettings] = None


def get_settings() -> FlashSettings:
    """Get the shared settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = FlashSettings()
        logger.debug("Loaded flashlib settings")
    return _settings


def configure_settings(settings: FlashSettings) -> FlashSettings:
    """Replace the shared settings.

    Provider configurations already resolved keep the values they captured.

    Args:
        settings: Settings object to install

    Returns:
        The installed settings
    """
    global _settings
    _settings = settings
    return _settings


def reset_settings() -> None:
    """Discard the shared settings so the next access reloads them."""
    global _settings
    _settings = None
