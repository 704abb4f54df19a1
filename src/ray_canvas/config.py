"""Application configuration models and helpers."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic.functional_validators import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Supported logging levels."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


class Settings(BaseSettings):
    """Environment-driven application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # Export
    ppm_line_width: int = Field(70, alias="PPM_LINE_WIDTH")

    # Canvas defaults for the CLI
    canvas_w: int = Field(100, alias="CANVAS_W")
    canvas_h: int = Field(50, alias="CANVAS_H")

    # Scenes
    projectile_velocity: float = Field(11.25, alias="PROJECTILE_VELOCITY")

    # Logging
    log_level: LogLevel = Field(LogLevel.INFO, alias="LOG_LEVEL")

    @field_validator("ppm_line_width", "canvas_w", "canvas_h")
    @classmethod
    def _ensure_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be positive")
        return value

    @field_validator("projectile_velocity")
    @classmethod
    def _ensure_positive_velocity(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Velocity must be positive")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
