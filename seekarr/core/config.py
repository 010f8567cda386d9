"""Configuration management for Seekarr."""

from functools import lru_cache
from typing import List

from pydantic import PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Provider settings
    provider_timeout: PositiveInt = 30  # Timeout for provider searches in seconds

    # Movie view settings
    # Provider sources allowed in the movie view, empty means all sources
    source_filter: List[str] = []

    @field_validator("source_filter")
    @classmethod
    def validate_source_filter(cls, v: List[str]) -> List[str]:
        cleaned = [s.strip() for s in v if s and s.strip()]
        return cleaned

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
