from storefront.domain.core.exceptions import (
    ConfigurationError,
    DuplicateKeyError,
    InvariantViolationError,
    ResourceNotFoundError,
)


class ProductNotFoundError(ResourceNotFoundError):
    """Raised when a product cannot be found."""
    def __init__(self, code: str):
        super().__init__("Product", code)


class BundleNotFoundError(ResourceNotFoundError):
    """Raised when a product bundle cannot be found."""
    def __init__(self, code: str):
        super().__init__("Bundle", code)


class DiscountNotFoundError(ResourceNotFoundError):
    """Raised when no discount is registered for a product code."""
    def __init__(self, code: str):
        super().__init__("Discount", code)


class DuplicateProductCodeError(DuplicateKeyError):
    """Raised when a registry already holds a component with the same code."""
    pass


class BundleCycleError(InvariantViolationError):
    """Raised when adding a component would make a bundle contain itself."""
    def __init__(self, bundle_code: str, child_code: str):
        super().__init__(
            f"Cannot add {child_code} to bundle {bundle_code}: bundle would contain itself"
        )
        self.bundle_code = bundle_code
        self.child_code = child_code


class InvalidDiscountError(ConfigurationError):
    """Raised when a discount rate falls outside the 0-100 range."""
    def __init__(self, discount_rate: float):
        super().__init__(f"Discount rate must be between 0 and 100, got {discount_rate}")
        self.discount_rate = discount_rate
