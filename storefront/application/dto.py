"""Data transfer objects handed from the application layer to the CLI."""
from typing import Any, Dict, List
from pydantic import BaseModel, ConfigDict, Field

from storefront.domain.catalog.component import ProductComponent


class BaseDTO(BaseModel):
    """Base class for all DTOs with a stable to_dict() API."""
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


class CatalogEntryDTO(BaseDTO):
    """Flat view of one catalog component."""
    code: str
    kind: str
    name: str
    price: float
    display: str
    items: List[str] = Field(default_factory=list)

    @classmethod
    def from_component(cls, component: ProductComponent) -> 'CatalogEntryDTO':
        """Build the view from any catalog component."""
        return cls(
            code=component.get_code(),
            kind=component.kind,
            name=component.get_name(),
            price=component.get_price(),
            display=component.display(),
            items=[child.get_code() for child in component.get_children()],
        )
