"""Shared kernel for the catalog domain."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    DuplicateKeyError,
    InvariantViolationError,
    ResourceNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ResourceNotFoundError",
    "DuplicateKeyError",
    "InvariantViolationError",
    "ConfigurationError",
]
