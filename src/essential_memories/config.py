"""Configuration management for essential_memories.

This module provides typed configuration classes using pydantic-settings.
Configuration is loaded from environment variables with optional .env file support.
"""

from enum import StrEnum

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "LeapDayPolicy",
    "MongoSettings",
    "EssentialMemoriesConfig",
]


class LeapDayPolicy(StrEnum):
    """Where a Feb 29 memory lands in a year without Feb 29."""

    MARCH_1 = "march_1"
    FEBRUARY_28 = "february_28"


class MongoSettings(BaseSettings):
    """MongoDB connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="ESSENTIAL_MEMORIES_MONGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    uri: SecretStr = SecretStr("mongodb://localhost:27017")
    database: str = "essential_memories"
    collection_prefix: str = ""


class EssentialMemoriesConfig(BaseSettings):
    """Main configuration for scheduling, quotas and clock.

    Example usage:
        config = EssentialMemoriesConfig()
        if count >= config.free_memory_limit:
            ...
    """

    model_config = SettingsConfigDict(
        env_prefix="ESSENTIAL_MEMORIES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Free tier
    free_memory_limit: int = Field(default=3, ge=0)

    # Scheduling
    practice_deck_size: int = Field(default=10, ge=1)
    upcoming_limit: int = Field(default=5, ge=0)
    leap_day_policy: LeapDayPolicy = LeapDayPolicy.MARCH_1

    # IANA zone used to decide what "today" is
    timezone: str = "UTC"
