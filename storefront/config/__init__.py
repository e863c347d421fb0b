"""Configuration package."""

from .manager import ConfigurationManager
from .schemas import AppConfig, CatalogConfig, CLIConfig, LoggingConfig

__all__ = [
    "ConfigurationManager",
    "AppConfig",
    "CatalogConfig",
    "CLIConfig",
    "LoggingConfig",
]
