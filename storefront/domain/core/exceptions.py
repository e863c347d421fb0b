# storefront/domain/core/exceptions.py
from typing import Any, Optional, List

class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass

class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details

class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with code {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id

class DuplicateKeyError(DomainException):
    """Raised when a resource is registered under a key that is already taken."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with code {resource_id} already exists")
        self.resource_type = resource_type
        self.resource_id = resource_id

class InvariantViolationError(DomainException):
    """Raised when an operation would break a structural invariant."""
    pass

class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
