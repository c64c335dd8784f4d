"""Importer settings with Pydantic validation and environment loading."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, List

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


DEFAULT_SCREENER_IDS = [
    "day_gainers",
    "day_losers",
    "most_actives",
    "high_yield_bond",
    "most_shorted_stocks",
    "undervalued_large_caps",
    "aggressive_small_caps",
    "growth_technology_stocks",
    "small_cap_gainers",
    "portfolio_anchors",
    "conservative_foreign_funds",
]


class Settings(BaseSettings):
    """Importer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = "stocks-importer"
    debug: bool = Field(default=False, description="Include source locations in JSON logs")
    environment: str = Field(
        default="production",
        description="Environment: development, staging, production",
    )

    # Storage
    database_path: str = Field(
        default="resources/stocks.db",
        description="SQLite database file (directory is created if missing)",
    )
    reset_schema_on_start: bool = Field(
        default=False,
        description="Drop and recreate every managed table before importing",
    )

    # Symbol sources
    watchlist_dir: str = Field(
        default="resources/watchlists",
        description="Directory scanned for *.json watchlist files",
    )
    screener_enabled: bool = Field(default=True, description="Include Yahoo screener results")
    screener_ids: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_SCREENER_IDS)
    )
    screener_count: int = Field(default=100, ge=1, le=250)

    # Pacing between quote summary fetches (seconds)
    fetch_delay_min: float = Field(default=3.0, ge=0)
    fetch_delay_max: float = Field(default=7.0, ge=0)

    # External API
    external_api_timeout: int = Field(
        default=30, ge=5, le=120, description="External API timeout in seconds"
    )
    external_api_retries: int = Field(
        default=3, ge=1, le=5, description="External API attempts per call"
    )

    # Logging
    log_level: str = Field(
        default="INFO", description="Log level: DEBUG, INFO, WARNING, ERROR"
    )
    log_format: str = Field(default="text", description="Log format: json or text")
    log_dir: str = Field(default="log", description="Directory for log files")
    log_file_name: str = Field(default="stocks_importer.log")
    log_max_bytes: int = Field(default=1024 * 1024, ge=1024)
    log_backup_count: int = Field(default=5, ge=0)

    @field_validator("screener_ids", mode="before")
    @classmethod
    def parse_screener_ids(cls, v):
        if isinstance(v, str):
            return [s.strip().lower() for s in v.split(",") if s.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            raise ValueError(f"log_level must be one of {valid}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        lower = v.lower()
        if lower not in {"json", "text"}:
            raise ValueError("log_format must be 'json' or 'text'")
        return lower

    @model_validator(mode="after")
    def check_delay_window(self) -> "Settings":
        if self.fetch_delay_max < self.fetch_delay_min:
            raise ValueError("fetch_delay_max must be >= fetch_delay_min")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Cached settings factory."""
    return Settings()


settings = get_settings()
