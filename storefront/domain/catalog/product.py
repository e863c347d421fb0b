from typing import ClassVar
from pydantic import Field
from storefront.domain.catalog.component import ProductComponent
from storefront.domain.catalog.value_objects import format_amount


class Product(ProductComponent):
    """Individual product - leaf of the catalog composite."""
    kind: ClassVar[str] = "product"

    code: str = Field(..., min_length=1)
    name: str
    price: float = Field(..., ge=0)

    def get_code(self) -> str:
        return self.code

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> float:
        return self.price

    def display(self) -> str:
        return f"Product: {self.name} (Price: ${format_amount(self.price)})"
