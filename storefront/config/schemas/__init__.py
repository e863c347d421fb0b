"""Configuration schemas package."""

from .app_schema import AppConfig, CatalogConfig, CLIConfig, validate_config
from .logging_schema import LoggingConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "CatalogConfig",
    "CLIConfig",
    "LoggingConfig",
]
