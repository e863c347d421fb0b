"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

from storefront.config.defaults import LogDestination, LogLevel


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Root log level")
    destination: str = Field("stdout", description="Where logs go: file, stdout or both")
    file_path: str = Field("logs/storefront.log", description="Log file path")
    max_size_mb: int = Field(10, description="Size at which the log file is rotated")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Upper-cased log level

        Raises:
            ValueError: If the level is unknown
        """
        level = v.upper()
        if level not in [e.value for e in LogLevel]:
            raise ValueError(f"Log level must be one of {[e.value for e in LogLevel]}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        if v not in [e.value for e in LogDestination]:
            raise ValueError(f"Log destination must be one of {[e.value for e in LogDestination]}")
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 1:
            raise ValueError("Log rotation settings must be at least 1")
        return v
