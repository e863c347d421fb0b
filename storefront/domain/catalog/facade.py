"""Product facade - single entry point over the catalog registries."""
from typing import List, Optional
from storefront.domain.catalog.bundle import ProductBundle
from storefront.domain.catalog.component import ProductComponent
from storefront.domain.catalog.discount import DiscountedProductAdapter
from storefront.domain.catalog.product import Product
from storefront.domain.catalog.registry import ProductComponentRegistry
from storefront.domain.catalog.value_objects import DuplicatePolicy
from storefront.helpers.logger import get_logger

logger = get_logger(__name__)


class ProductFacade:
    """
    Coordinates the product, bundle and discount registries.

    Lookups report a missing code by returning None (or False for
    add_product_to_bundle); turning that into a user-facing error is left
    to the caller.
    """

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT):
        self._products: ProductComponentRegistry[Product] = ProductComponentRegistry(
            "Product", duplicate_policy)
        self._bundles: ProductComponentRegistry[ProductBundle] = ProductComponentRegistry(
            "Bundle", duplicate_policy)
        self._discounts: ProductComponentRegistry[DiscountedProductAdapter] = ProductComponentRegistry(
            "Discount", duplicate_policy)

    @property
    def products(self) -> ProductComponentRegistry[Product]:
        return self._products

    @property
    def bundles(self) -> ProductComponentRegistry[ProductBundle]:
        return self._bundles

    @property
    def discounts(self) -> ProductComponentRegistry[DiscountedProductAdapter]:
        return self._discounts

    def add_product(self, product: Product) -> None:
        self._products.add(product)
        logger.info("Product added", code=product.code, price=product.price)

    def add_product_bundle(self, bundle: ProductBundle) -> None:
        self._bundles.add(bundle)
        logger.info("Bundle added", code=bundle.code, children=len(bundle.children))

    def add_discounted_product(self, discount: DiscountedProductAdapter) -> None:
        self._discounts.add(discount)
        logger.info("Discount added", code=discount.get_code(), offer=discount.offer_name)

    def add_product_to_bundle(self, component: ProductComponent, bundle_code: str) -> bool:
        """
        Attach a component to the bundle registered under bundle_code.

        Args:
            component: Product (or bundle) to attach
            bundle_code: Code of the target bundle
        Returns:
            True if attached, False if no such bundle exists
        Raises:
            BundleCycleError: If the bundle would end up containing itself
        """
        bundle = self._bundles.find(bundle_code)
        if bundle is None:
            logger.warning("Bundle does not exist", bundle_code=bundle_code,
                           component_code=component.get_code())
            return False
        bundle.add(component)
        return True

    def get_product(self, code: str) -> Optional[Product]:
        return self._products.find(code)

    def get_bundle(self, code: str) -> Optional[ProductBundle]:
        return self._bundles.find(code)

    def get_discount(self, code: str) -> Optional[DiscountedProductAdapter]:
        return self._discounts.find(code)

    def find_component(self, code: str) -> Optional[ProductComponent]:
        """Look a code up among products first, then bundles."""
        product = self._products.find(code)
        if product is not None:
            return product
        return self._bundles.find(code)

    # Removing a product leaves it attached to any bundle that references it
    def remove_product(self, code: str) -> Optional[Product]:
        return self._products.remove(code)

    def remove_bundle(self, code: str) -> Optional[ProductBundle]:
        return self._bundles.remove(code)

    def remove_discount(self, code: str) -> Optional[DiscountedProductAdapter]:
        return self._discounts.remove(code)

    def list_products(self) -> List[Product]:
        return self._products.find_all()

    def list_bundles(self) -> List[ProductBundle]:
        return self._bundles.find_all()

    def list_discounts(self) -> List[DiscountedProductAdapter]:
        return self._discounts.find_all()
