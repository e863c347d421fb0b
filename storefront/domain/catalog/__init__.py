"""Catalog bounded context - products, bundles and special offers."""

from .bundle import ProductBundle
from .component import ProductComponent
from .discount import DiscountedProduct, DiscountedProductAdapter
from .exceptions import (
    BundleCycleError,
    BundleNotFoundError,
    DiscountNotFoundError,
    DuplicateProductCodeError,
    InvalidDiscountError,
    ProductNotFoundError,
)
from .facade import ProductFacade
from .product import Product
from .registry import ProductComponentRegistry
from .value_objects import DiscountRate, DuplicatePolicy

__all__: list[str] = [
    "ProductComponent",
    "Product",
    "ProductBundle",
    "DiscountedProduct",
    "DiscountedProductAdapter",
    "ProductComponentRegistry",
    "ProductFacade",
    "DiscountRate",
    "DuplicatePolicy",
    "ProductNotFoundError",
    "BundleNotFoundError",
    "DiscountNotFoundError",
    "DuplicateProductCodeError",
    "BundleCycleError",
    "InvalidDiscountError",
]
