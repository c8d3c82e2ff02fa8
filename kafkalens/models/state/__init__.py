"""Application state and settings models."""

from kafkalens.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    ConnectionSettings,
)
from kafkalens.models.state.config_manager import ConfigManager

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConnectionSettings",
]
