"""Catalog application service - primitive-argument operations for the CLI."""
from typing import Any, Dict, Iterable, List, Optional

from storefront.application.dto import CatalogEntryDTO
from storefront.config.schemas import CatalogConfig
from storefront.domain.catalog.bundle import ProductBundle
from storefront.domain.catalog.component import ProductComponent
from storefront.domain.catalog.discount import DiscountedProductAdapter
from storefront.domain.catalog.exceptions import (
    BundleNotFoundError,
    DiscountNotFoundError,
    ProductNotFoundError,
)
from storefront.domain.catalog.facade import ProductFacade
from storefront.domain.catalog.product import Product
from storefront.domain.core.exceptions import ValidationError
from storefront.helpers.logger import get_logger

logger = get_logger(__name__)

CATALOG_KINDS = ("products", "bundles", "discounts")


class CatalogApplicationService:
    """Application service for catalog operations."""

    def __init__(self, facade: Optional[ProductFacade] = None,
                 catalog_config: Optional[CatalogConfig] = None):
        self._config = catalog_config or CatalogConfig()
        self._facade = facade or ProductFacade(self._config.duplicate_policy)

    @property
    def facade(self) -> ProductFacade:
        return self._facade

    def create_product(self, code: str, name: str, price: float) -> Product:
        """Create and register a product."""
        product = Product(code=code, name=name, price=price)
        self._facade.add_product(product)
        return product

    def create_bundle(self, code: str, name: str,
                      component_codes: Iterable[str] = ()) -> ProductBundle:
        """
        Create and register a bundle, attaching existing components by code.

        Every code is resolved before anything is registered, so an unknown
        code leaves the catalog untouched.

        Args:
            code: Bundle code
            name: Bundle name
            component_codes: Codes of products or bundles to put in the bundle
        Returns:
            The registered bundle
        Raises:
            ProductNotFoundError: If a component code matches nothing
        """
        components = [self._resolve_component(c) for c in component_codes]
        bundle = ProductBundle(code=code, name=name)
        for component in components:
            bundle.add(component)
        self._facade.add_product_bundle(bundle)
        return bundle

    def attach_to_bundle(self, component_code: str, bundle_code: str) -> ProductBundle:
        """
        Attach an existing product or bundle to a registered bundle.

        Raises:
            ProductNotFoundError: If component_code matches nothing
            BundleNotFoundError: If bundle_code matches no bundle
        """
        component = self._resolve_component(component_code)
        if not self._facade.add_product_to_bundle(component, bundle_code):
            raise BundleNotFoundError(bundle_code)
        return self._facade.get_bundle(bundle_code)

    def create_discount(self, product_code: str, offer_name: str,
                        discount_rate: float) -> DiscountedProductAdapter:
        """
        Put a special offer on a registered product.

        Raises:
            ProductNotFoundError: If product_code matches no product
            InvalidDiscountError: If the rate is out of range and the range is enforced
        """
        product = self._facade.get_product(product_code)
        if product is None:
            raise ProductNotFoundError(product_code)
        discount = DiscountedProductAdapter.from_product(
            product, offer_name, discount_rate,
            enforce_range=self._config.enforce_discount_range
        )
        self._facade.add_discounted_product(discount)
        return discount

    def remove(self, kind: str, code: str) -> ProductComponent:
        """
        Remove a component from the registry for kind.

        Raises:
            ValidationError: If kind is not products, bundles or discounts
            ResourceNotFoundError: If nothing is registered under code
        """
        self._check_kind(kind)
        removers = {
            "products": (self._facade.remove_product, ProductNotFoundError),
            "bundles": (self._facade.remove_bundle, BundleNotFoundError),
            "discounts": (self._facade.remove_discount, DiscountNotFoundError),
        }
        remover, not_found = removers[kind]
        removed = remover(code)
        if removed is None:
            raise not_found(code)
        logger.info("Component removed", kind=kind, code=code)
        return removed

    def list_catalog(self, kind: str) -> Dict[str, Any]:
        """
        List every component of one kind.

        Returns:
            Dictionary with the entries under the kind key and a message
        """
        self._check_kind(kind)
        listers = {
            "products": self._facade.list_products,
            "bundles": self._facade.list_bundles,
            "discounts": self._facade.list_discounts,
        }
        entries: List[Dict[str, Any]] = [
            CatalogEntryDTO.from_component(component).to_dict()
            for component in listers[kind]()
        ]
        return {kind: entries, "message": f"Get all {kind} success."}

    @staticmethod
    def _check_kind(kind: str) -> None:
        if kind not in CATALOG_KINDS:
            raise ValidationError(f"Unknown catalog kind: {kind}", {"kind": kind})

    def _resolve_component(self, code: str) -> ProductComponent:
        component = self._facade.find_component(code)
        if component is None:
            raise ProductNotFoundError(code)
        return component
