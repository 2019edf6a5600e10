"""
Library Configuration.

Pydantic settings for type-safe environment configuration.
All values can be overridden with SMART_UTILS_* environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SMART_UTILS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Console Logger ===
    log_enabled: bool = Field(
        default=True,
        description="Whether the console logger prints anything",
    )
    log_level: Literal["DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"] = Field(
        default="DEBUG",
        description="Minimum console logger level",
    )
    log_show_timestamp: bool = Field(
        default=True,
        description="Prefix each console line with a timestamp",
    )
    log_timestamp_format: str | None = Field(
        default="HH:mm:ss",
        description="Timestamp pattern; unset means ISO-8601",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that receives a plain copy of each line",
    )

    # === Dates ===
    default_date_pattern: str = Field(
        default="yyyy-MM-dd HH:mm",
        description="Pattern used by format_date when none is given",
    )

    # === Widgets ===
    snackbar_duration_seconds: float = Field(
        default=2.0,
        gt=0,
        description="How long a snackbar stays visible",
    )
    toast_duration_seconds: float = Field(
        default=2.0,
        gt=0,
        description="How long a toast stays before it removes itself",
    )
    toast_bottom_offset: float = Field(
        default=80.0,
        ge=0,
        description="Distance of a toast from the bottom edge",
    )
    bottom_sheet_max_height_fraction: float = Field(
        default=0.8,
        gt=0,
        le=1,
        description="Maximum bottom sheet height as a fraction of the screen",
    )

    # === Connectivity ===
    connectivity_probe_url: str | None = Field(
        default=None,
        description="Optional URL probed to confirm internet reachability",
    )
    connectivity_timeout_seconds: float = Field(
        default=3.0,
        gt=0,
        description="Timeout for the reachability probe",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
