"""Application configuration using Pydantic Settings.

Loads configuration from environment variables and .env files.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MergePolicy = Literal["sequential", "union"]


class ResolutionSettings(BaseSettings):
    """Profile resolution configuration."""

    model_config = SettingsConfigDict(env_prefix="RESOLUTION_")

    # Import merge policy
    merge_policy: MergePolicy = Field(
        default="sequential",
        description=(
            "sequential: excludes apply in declaration order; "
            "union: all includes merged, then all excludes removed"
        ),
    )

    # Include ids missing from their catalog are always dropped
    warn_on_unknown_ids: bool = Field(
        default=False,
        description="Log dropped include ids at warning instead of debug",
    )


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"
    include_timestamp: bool = True
    include_caller: bool = True


class Settings(BaseSettings):
    """Main application settings aggregating all configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Application info
    app_name: str = "OSCALViz"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False

    # Sub-configurations
    resolution: ResolutionSettings = Field(default_factory=ResolutionSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton."""
    return Settings()
