"""
Configuration management for the My Bus Tracker client.
"""

from .config_manager import (
    APIConfig,
    ConfigData,
    ConfigManager,
    ConfigurationError,
    LoggingConfig,
)

__all__ = [
    "APIConfig",
    "ConfigData",
    "ConfigManager",
    "ConfigurationError",
    "LoggingConfig",
]
