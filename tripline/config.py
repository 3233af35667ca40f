"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tripline.scheduling.conflicts import MIN_COMFORTABLE_GAP_MINUTES
from tripline.scheduling.travel import ASSUMED_AVERAGE_SPEED_KMH


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRIPLINE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Trip API base URL (used to resolve relative image paths)
    api_url: str = "http://localhost:3000"

    # Travel estimation (km/h)
    assumed_average_speed_kmh: float = Field(default=ASSUMED_AVERAGE_SPEED_KMH, gt=0)

    # Conflict thresholds (minutes)
    min_comfortable_gap_minutes: int = Field(default=MIN_COMFORTABLE_GAP_MINUTES, ge=0)

    # Logging
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
