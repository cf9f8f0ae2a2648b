"""
Configuration management for the My Bus Tracker client.

This module handles loading, saving, and validating client configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..api.request_builder import BASE_URL

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "BUSNOTIFIER_MYBUSTRACKER_APIKEY"
PLACEHOLDER_API_KEY = "YOUR_API_KEY_HERE"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class APIConfig(BaseModel):
    """Configuration for My Bus Tracker web service access."""

    api_key: str = Field(..., description="Developer API key issued by My Bus Tracker")
    base_url: str = BASE_URL


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class ConfigData(BaseModel):
    """Main configuration data model."""

    api: APIConfig
    logging: LoggingConfig = LoggingConfig()


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages client configuration with file persistence.

    Loads configuration from a JSON file. When no file exists, the API key
    is taken from the BUSNOTIFIER_MYBUSTRACKER_APIKEY environment variable.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                per-user configuration directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None
        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/MyBusTracker/config.json
        Elsewhere, uses XDG_CONFIG_HOME/MyBusTracker/config.json or
        ~/.config/MyBusTracker/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / "MyBusTracker" / "config.json"

        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            config_dir = Path(xdg_config) / "MyBusTracker"
        else:
            config_dir = Path.home() / ".config" / "MyBusTracker"
        return config_dir / "config.json"

    def load_config(self) -> ConfigData:
        """
        Load configuration from file, or from the environment.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the file is invalid, or there is no file
                and no API key in the environment
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(
                f"Config file doesn't exist at {self.config_path}, "
                f"reading {API_KEY_ENV_VAR}"
            )
            self.config = self.config_from_environment()
            return self.config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except (TypeError, ValidationError) as e:
            raise ConfigurationError(f"Invalid config file: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load config: {e}")

        logger.debug(f"Successfully loaded config from: {self.config_path}")
        return self.config

    @staticmethod
    def config_from_environment() -> ConfigData:
        """
        Build configuration from environment variables.

        Raises:
            ConfigurationError: If the API key variable is not set
        """
        api_key = os.environ.get(API_KEY_ENV_VAR, "").strip()
        if not api_key:
            raise ConfigurationError(f"Missing API key ({API_KEY_ENV_VAR})")
        return ConfigData(api=APIConfig(api_key=api_key))

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

        self.config = config
        return True

    def create_default_config(self) -> None:
        """Create a configuration file with a placeholder API key."""
        self.save_config(ConfigData(api=APIConfig(api_key=PLACEHOLDER_API_KEY)))

    def validate_api_credentials(self) -> bool:
        """
        Check if an API key is configured.

        Returns:
            bool: True if a real key is set, False otherwise
        """
        if self.config is None:
            try:
                self.load_config()
            except ConfigurationError as e:
                logger.warning(f"Configuration unavailable: {e}")
                return False

        api_key = self.config.api.api_key
        return bool(api_key) and api_key != PLACEHOLDER_API_KEY
