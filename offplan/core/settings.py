"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=False, description="Render logs as JSON lines")

    # Catalog
    data_path: str = Field(default="data.json", description="Path to the catalog JSON file")

    # Listing defaults
    page_size: int = Field(default=12, ge=1, le=200)
    default_max_price: float = Field(default=50_000_000, ge=0, description="Initial max price filter in AED")
    featured_count: int = Field(default=3, ge=0)
    popular_developers_count: int = Field(default=8, ge=0)

    # ROI hand-off
    fallback_unit_price: float = Field(
        default=1_000_000, ge=0, description="Price used when neither unit nor property has one"
    )

    # Export
    export_dir: str = Field(default="results", description="Directory for exported results")

    model_config = {
        "env_prefix": "OFFPLAN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
