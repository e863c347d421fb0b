"""Special offers and their adapter onto the catalog component contract."""
from typing import ClassVar
from storefront.domain.catalog.component import ProductComponent
from storefront.domain.catalog.product import Product
from storefront.domain.catalog.value_objects import DiscountRate


class DiscountedProduct:
    """
    Special offer on a single product.

    Speaks its own interface (get_details / get_discounted_price) rather
    than the catalog component one; DiscountedProductAdapter bridges the two.
    """

    def __init__(self, offer_name: str, discount_rate: float, original_product: Product,
                 enforce_range: bool = True):
        self.offer_name = offer_name
        self.discount_rate = DiscountRate(discount_rate, enforce_range=enforce_range)
        self.original_product = original_product

    def get_details(self) -> str:
        return f"Special Offer: {self.offer_name} (Discount: {self.discount_rate}%)"

    def get_discounted_price(self) -> float:
        return self.discount_rate.apply(self.original_product.get_price())

    def get_code(self) -> str:
        return self.original_product.get_code()

    def __repr__(self) -> str:
        return (f"DiscountedProduct(offer_name={self.offer_name!r}, "
                f"discount_rate={self.discount_rate.value!r}, "
                f"original_product={self.original_product.code!r})")


class DiscountedProductAdapter(ProductComponent):
    """Exposes a DiscountedProduct as a catalog component."""
    kind: ClassVar[str] = "discount"

    special_offer: DiscountedProduct

    @classmethod
    def from_product(cls, product: Product, offer_name: str, discount_rate: float,
                     enforce_range: bool = True) -> 'DiscountedProductAdapter':
        """
        Build the offer and wrap it in one step.

        Args:
            product: Product the offer applies to
            offer_name: Name shown in the offer description
            discount_rate: Percentage taken off the product price
            enforce_range: Reject rates outside 0-100

        Returns:
            Adapter exposing the offer as a catalog component

        Raises:
            InvalidDiscountError: If enforce_range is set and the rate is out of range
        """
        offer = DiscountedProduct(offer_name, discount_rate, product, enforce_range=enforce_range)
        return cls(special_offer=offer)

    @property
    def offer_name(self) -> str:
        return self.special_offer.offer_name

    @property
    def original_product(self) -> Product:
        return self.special_offer.original_product

    def get_code(self) -> str:
        return self.special_offer.get_code()

    def get_name(self) -> str:
        return self.offer_name

    def get_price(self) -> float:
        return self.special_offer.get_discounted_price()

    def display(self) -> str:
        # only the offer text, the wrapped product description is not repeated
        return self.special_offer.get_details()
