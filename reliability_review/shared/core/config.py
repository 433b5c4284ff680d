from functools import lru_cache
from threading import Lock
from typing import List, Optional
import logging
import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator, model_validator


@lru_cache
def get_settings() -> "Settings":
    """Returns a singleton instance of the application settings."""
    return Settings()


_settings_reload_lock = Lock()


def reload_settings_from_environment() -> "Settings":
    """
    Atomically rebuild and replace cached settings from environment values.

    This avoids mutating the cached singleton instance in-place.
    """
    logger = structlog.get_logger()
    with _settings_reload_lock:
        logger.info("settings_reload_started")
        get_settings.cache_clear()
        refreshed = get_settings()
        logger.info("settings_reload_completed")
        return refreshed


class Settings(BaseSettings):
    """
    Runtime configuration for the reliability review.
    Uses Pydantic-Settings for environment variable parsing from .env.
    """

    APP_NAME: str = "reliability-review"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Service keys (e.g. "cosmosdb", "signalr"). Empty means every registered analyzer.
    ENABLED_ANALYZERS: List[str] = Field(default_factory=list)

    # Transient-failure handling for the Azure listing/diagnostics collaborators
    AZURE_RETRY_MAX_ATTEMPTS: int = Field(default=3, ge=1)
    AZURE_RETRY_MIN_WAIT: float = Field(default=2.0, ge=0)
    AZURE_RETRY_MAX_WAIT: float = Field(default=10.0, ge=0)
    # Seconds; forwarded as the SDK `timeout` keyword. None keeps the client default.
    AZURE_REQUEST_TIMEOUT: Optional[float] = Field(default=None, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {value}")
        return level

    @field_validator("ENABLED_ANALYZERS")
    @classmethod
    def _normalize_analyzers(cls, value: List[str]) -> List[str]:
        return [key.strip().lower() for key in value if key and key.strip()]

    @model_validator(mode="after")
    def _validate_retry_window(self) -> "Settings":
        if self.AZURE_RETRY_MIN_WAIT > self.AZURE_RETRY_MAX_WAIT:
            raise ValueError(
                "AZURE_RETRY_MIN_WAIT must not exceed AZURE_RETRY_MAX_WAIT"
            )
        return self
