"""Configuration."""

from planar.shared.config.settings import (
    DisplaySettings,
    LoggingSettings,
    RandomSettings,
    Settings,
    get_settings,
)

__all__ = [
    "DisplaySettings",
    "LoggingSettings",
    "RandomSettings",
    "Settings",
    "get_settings",
]
