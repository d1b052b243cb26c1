"""
Configuration for oriented_mbr package.

Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MBRConfig(BaseSettings):
    """Numerical tolerances for the MBR pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="ORIENTED_MBR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Point preprocessing
    dedup_tolerance: float = Field(
        default=1e-6,
        description="Grid size used to merge near-identical points",
        gt=0.0,
        le=1.0,
    )

    # Hull construction
    angle_tolerance: float = Field(
        default=1e-10,
        description="Polar angles closer than this are sorted by distance",
        ge=0.0,
        le=1e-3,
    )

    # Rotating calipers
    direction_tolerance: float = Field(
        default=1e-10,
        description="Edge directions whose dot product exceeds 1 - this "
        "value are merged",
        ge=0.0,
        le=1e-3,
    )


@lru_cache
def get_config() -> MBRConfig:
    """Get cached configuration instance."""
    return MBRConfig()
