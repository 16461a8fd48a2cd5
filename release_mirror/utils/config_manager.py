"""
Configuration management utilities.

This module loads the optional TOML configuration file that supplies
defaults for values not given on the command line or in the environment.

Example file::

    [storage]
    bucket_name = "releases"
    endpoint_url = "https://<account>.r2.cloudflarestorage.com"
    access_key_id = "..."
    access_key_secret = "..."

    [source]
    repository = "acme/widget"
    token = "..."
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Mapping of TransferContext fields to dotted config file keys
CONFIG_KEYS = {
    "bucket_name": "storage.bucket_name",
    "access_key_id": "storage.access_key_id",
    "access_key_secret": "storage.access_key_secret",
    "endpoint_url": "storage.endpoint_url",
    "dest": "storage.dest",
    "repository": "source.repository",
    "github_token": "source.token",
}


class ConfigManager:
    """
    Manages configuration loading and access.

    This class provides a centralized way to load and access configuration
    from TOML files with proper error handling.
    """

    def __init__(self, config_path: str) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path).expanduser()
        self._config: Optional[Dict[str, Any]] = None

    def load(self) -> Dict[str, Any]:
        """
        Load configuration from file.

        Returns:
            Dictionary containing configuration data

        Raises:
            ConfigurationError: If the file is missing or is not valid TOML
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "rb") as f:
                self._config = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in configuration file {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to read configuration file {self.config_path}: {e}") from e

        logger.debug("Loaded configuration from %s", self.config_path)
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Supports nested keys using dot notation (e.g., "storage.bucket_name").

        Args:
            key: Configuration key (supports dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value: Any = self.load()

        for k in key.split("."):
            if not isinstance(value, dict):
                return default
            value = value.get(k)
            if value is None:
                return default

        return value

    def transfer_defaults(self) -> Dict[str, Any]:
        """
        Collect TransferContext values present in the file.

        Returns:
            Dictionary of field name to value for every configured key
        """
        defaults = {}
        for field, key in CONFIG_KEYS.items():
            value = self.get(key)
            if value is not None:
                defaults[field] = value
        return defaults


__all__ = ["ConfigManager", "CONFIG_KEYS"]
