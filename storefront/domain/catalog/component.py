"""Catalog component contract - shared by products, bundles and discounts."""
from abc import ABC, abstractmethod
from typing import ClassVar, Tuple
from pydantic import BaseModel, ConfigDict


class ProductComponent(BaseModel, ABC):
    """Base class for everything the catalog can price and display."""
    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        arbitrary_types_allowed=True
    )

    kind: ClassVar[str] = "component"

    @abstractmethod
    def get_code(self) -> str:
        """Get the code identifying this component inside its registry."""

    @abstractmethod
    def get_name(self) -> str:
        """Get the label shown next to the code in listings."""

    @abstractmethod
    def get_price(self) -> float:
        """Get the price of this component."""

    @abstractmethod
    def display(self) -> str:
        """Get a human-readable summary."""

    def get_children(self) -> Tuple["ProductComponent", ...]:
        """Get directly nested components; leaves have none."""
        return ()

    def contains(self, component: "ProductComponent") -> bool:
        """Whether component is nested somewhere inside this one."""
        return False
