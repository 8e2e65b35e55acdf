"""Application settings using Pydantic."""

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings(BaseSettings):
    """Logging settings."""
    model_config = SettingsConfigDict(
        env_prefix="PLANAR_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_colored: bool = True

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return level


class RandomSettings(BaseSettings):
    """Random source settings."""
    model_config = SettingsConfigDict(
        env_prefix="PLANAR_RANDOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    seed: int | None = None


class DisplaySettings(BaseSettings):
    """Output formatting settings."""
    model_config = SettingsConfigDict(
        env_prefix="PLANAR_DISPLAY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    precision: int = Field(default=6, ge=0, le=15)


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_prefix="PLANAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore"
    )

    app_name: str = "planar"
    app_version: str = "1.0.0"
    debug: bool = False

    # Sub-settings
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    random: RandomSettings = Field(default_factory=RandomSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    def as_dict(self) -> dict[str, Any]:
        """Get a flat view of the effective configuration."""
        return {
            "app_name": self.app_name,
            "app_version": self.app_version,
            "debug": self.debug,
            "logging.level": self.logging.level,
            "logging.format": self.logging.format,
            "logging.console_colored": self.logging.console_colored,
            "random.seed": self.random.seed,
            "display.precision": self.display.precision,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
