"""Product bundle - the composite side of the catalog."""
from typing import ClassVar, List, Tuple
from pydantic import Field, PrivateAttr
from storefront.domain.catalog.component import ProductComponent
from storefront.domain.catalog.exceptions import BundleCycleError
from storefront.helpers.logger import get_logger

logger = get_logger(__name__)

INDENT = "  "


class ProductBundle(ProductComponent):
    """
    Bundle of catalog components priced as the sum of its children.

    Children keep insertion order and may themselves be bundles. A bundle
    references its children, it does not own them: the same product can live
    in the product registry and in any number of bundles.
    """
    kind: ClassVar[str] = "bundle"

    code: str = Field(..., min_length=1)
    name: str

    _children: List[ProductComponent] = PrivateAttr(default_factory=list)

    def add(self, child: ProductComponent) -> None:
        """
        Append a child component.

        Args:
            child: Component to append

        Raises:
            BundleCycleError: If child is this bundle or already contains it
        """
        if child is self or child.contains(self):
            raise BundleCycleError(self.code, child.get_code())
        self._children.append(child)
        logger.debug("Component added to bundle",
                     bundle_code=self.code,
                     child_code=child.get_code(),
                     child_count=len(self._children))

    @property
    def children(self) -> Tuple[ProductComponent, ...]:
        return self.get_children()

    def get_children(self) -> Tuple[ProductComponent, ...]:
        return tuple(self._children)

    def contains(self, component: ProductComponent) -> bool:
        for child in self._children:
            if child is component or child.contains(component):
                return True
        return False

    def get_code(self) -> str:
        return self.code

    def get_name(self) -> str:
        return self.name

    def get_price(self) -> float:
        return sum((child.get_price() for child in self._children), 0.0)

    def display(self) -> str:
        lines = [f"Bundle: {self.name}"]
        for child in self._children:
            # nested bundles render over several lines, indent every one of them
            lines.extend(f"{INDENT}{line}" for line in child.display().splitlines())
        return "\n".join(lines)