"""
Configuration manager.

Loads configuration in layers:
- built-in defaults (storefront.config.defaults)
- an optional JSON or YAML file merged on top
- environment variable expansion (${VAR:default})
and validates the result into a typed AppConfig.
"""
from __future__ import annotations

import copy
import json
import os
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from storefront.config.defaults import DEFAULT_CONFIG
from storefront.config.schemas import AppConfig, validate_config
from storefront.config.utils import expand_config_env_vars
from storefront.domain.core.exceptions import ConfigurationError
from storefront.helpers.logger import get_logger

logger = get_logger(__name__)


class ConfigurationManager:
    """
    Configuration access for one application run.

    Unlike a process-wide singleton, each instance owns its configuration;
    callers create one and pass it to whatever needs it.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration manager.

        Args:
            config_path: Optional path to a JSON or YAML configuration file

        Raises:
            ConfigurationError: If the file cannot be read or the result is invalid
        """
        self.config_path = config_path
        self.raw_config: Dict[str, Any] = {}
        self._app_config: Optional[AppConfig] = None
        self.reload()

    @property
    def config(self) -> AppConfig:
        """Get typed application configuration."""
        if self._app_config is None:
            raise ConfigurationError("Configuration not initialized")
        return self._app_config

    def reload(self) -> None:
        """Reload configuration from defaults, file and environment."""
        merged = copy.deepcopy(DEFAULT_CONFIG)
        if self.config_path:
            merged = self._deep_merge(merged, self._load_file(self.config_path))
        self.raw_config = expand_config_env_vars(merged)
        try:
            self._app_config = validate_config(self.raw_config)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        logger.debug("Configuration loaded", config_path=self.config_path)

    def get_raw_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary."""
        return copy.deepcopy(self.raw_config)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key (dot notation for nested keys)
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self.raw_config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'y', 'on')
        if isinstance(value, int):
            return value != 0
        return bool(value)

    @staticmethod
    def _load_file(config_path: str) -> Dict[str, Any]:
        if not os.path.isfile(config_path):
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if config_path.endswith(('.yaml', '.yml')):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        result = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = cls._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
