"""Configuration management for DOM transition recording."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.logging import configure_logging


class Settings(BaseSettings):
    """Settings loaded from ``DOM_TRANSITION_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOM_TRANSITION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO", description="Log level for transition lifecycle events"
    )
    log_json: bool = Field(False, description="Render logs as JSON instead of console output")
    log_timestamps: bool = Field(True, description="Include ISO timestamps in logs")


def get_settings() -> Settings:
    """Get transition settings."""
    return Settings()


def configure_logging_from_settings(settings: Optional[Settings] = None) -> None:
    """Apply logging configuration from settings."""
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        include_timestamp=settings.log_timestamps,
    )
