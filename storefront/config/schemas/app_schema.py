"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

from storefront.config.defaults import OutputFormat
from storefront.domain.catalog.value_objects import DuplicatePolicy

from .logging_schema import LoggingConfig


class CatalogConfig(BaseModel):
    """Catalog behaviour configuration."""

    duplicate_policy: DuplicatePolicy = Field(
        DuplicatePolicy.REJECT, description="How registries treat a repeated code"
    )
    enforce_discount_range: bool = Field(
        True, description="Reject discount rates outside 0-100"
    )

    @field_validator("duplicate_policy", mode="before")
    @classmethod
    def normalize_duplicate_policy(cls, v: Any) -> Any:
        """Accept the policy name in any case."""
        if isinstance(v, str):
            return v.lower()
        return v


class CLIConfig(BaseModel):
    """Interactive CLI configuration."""

    default_format: str = Field("table", description="Output format for listings")
    prompt: str = Field("> ", description="Prompt shown for menu input")

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate output format."""
        if v not in [e.value for e in OutputFormat]:
            raise ValueError(f"Output format must be one of {[e.value for e in OutputFormat]}")
        return v


class AppConfig(BaseModel):
    """Application configuration."""

    catalog: CatalogConfig = Field(default_factory=lambda: CatalogConfig())
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    cli: CLIConfig = Field(default_factory=lambda: CLIConfig())


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """
    Validate configuration.

    Args:
        config: Configuration to validate

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If configuration is invalid
    """
    return AppConfig(**config)
