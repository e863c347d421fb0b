# storefront/config/defaults.py
from typing import Any, Dict
from enum import Enum

class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"

class OutputFormat(str, Enum):
    """CLI output format enumeration."""
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"
    LIST = "list"

DEFAULT_CONFIG: Dict[str, Any] = {
    "catalog": {
        "duplicate_policy": "${STOREFRONT_DUPLICATE_POLICY:reject}",
        "enforce_discount_range": True
    },

    "logging": {
        "level": "${STOREFRONT_LOG_LEVEL:WARNING}",
        "destination": "${STOREFRONT_LOG_DESTINATION:stdout}",
        "file_path": "${STOREFRONT_LOG_DIR:logs}/storefront.log",
        "max_size_mb": 10,
        "backup_count": 5
    },

    "cli": {
        "default_format": "table",
        "prompt": "> "
    }
}
