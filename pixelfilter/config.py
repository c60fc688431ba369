"""
Library configuration.

Settings are read from environment variables prefixed with PIXELFILTER_
(nested sections use a double underscore, e.g. PIXELFILTER_SYSTEM__LOG_LEVEL)
and from an optional .env file.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pixelfilter.core.constants import FilterDefaults, PixelConstants, SystemConstants


class SystemSettings(BaseModel):
    """Logging configuration."""

    log_level: str = SystemConstants.LOG_LEVEL_DEFAULT
    log_format: str = SystemConstants.LOG_FORMAT

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {value}")
        return level


class FilterSettings(BaseModel):
    """Defaults applied by the filter service."""

    threshold_level: int = Field(
        default=FilterDefaults.THRESHOLD_LEVEL,
        ge=PixelConstants.MIN_LEVEL,
        le=PixelConstants.MAX_LEVEL,
    )
    morphology_iterations: int = Field(default=FilterDefaults.MORPHOLOGY_ITERATIONS, ge=0)
    clamp_edge_response: bool = FilterDefaults.CLAMP_EDGE_RESPONSE


class Settings(BaseSettings):
    """Top-level settings."""

    model_config = SettingsConfigDict(
        env_prefix=SystemConstants.ENV_PREFIX,
        env_nested_delimiter=SystemConstants.ENV_NESTED_DELIMITER,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    system: SystemSettings = Field(default_factory=SystemSettings)
    filters: FilterSettings = Field(default_factory=FilterSettings)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to use; defaults to get_settings()
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.system.log_level),
        format=settings.system.log_format,
    )
