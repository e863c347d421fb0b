"""Generic keyed collection of catalog components."""
from typing import Generic, Iterator, List, Optional, TypeVar
from storefront.domain.catalog.component import ProductComponent
from storefront.domain.catalog.exceptions import DuplicateProductCodeError
from storefront.domain.catalog.value_objects import DuplicatePolicy
from storefront.helpers.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T', bound=ProductComponent)


class ProductComponentRegistry(Generic[T]):
    """
    Ordered registry of one kind of catalog component, keyed by code.

    With DuplicatePolicy.REJECT (the default) a code appears at most once.
    With DuplicatePolicy.ALLOW duplicates are accepted: find() returns the
    first match and remove() drops every match.
    """

    def __init__(self, kind: str = "Product",
                 duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT):
        self.kind = kind
        self.duplicate_policy = DuplicatePolicy(duplicate_policy)
        self._items: List[T] = []

    def add(self, item: T) -> None:
        """
        Register an item at the end of the registry.

        Raises:
            DuplicateProductCodeError: If the code is taken and duplicates are rejected
        """
        code = item.get_code()
        if self.exists(code):
            if self.duplicate_policy == DuplicatePolicy.REJECT:
                raise DuplicateProductCodeError(self.kind, code)
            logger.warning("Duplicate code registered, lookups return the first entry",
                           kind=self.kind, code=code)
        self._items.append(item)
        logger.debug("Registered component", kind=self.kind, code=code, size=len(self._items))

    def find(self, code: str) -> Optional[T]:
        """
        Find the first item with the given code.

        Args:
            code: Code to look up
        Returns:
            Matching item, or None if nothing is registered under that code
        """
        return next((item for item in self._items if item.get_code() == code), None)

    def remove(self, code: str) -> Optional[T]:
        """
        Remove every item registered under code.

        Returns:
            The item find() would have returned before removal, or None
        """
        found = self.find(code)
        if found is None:
            return None
        self._items = [item for item in self._items if item.get_code() != code]
        logger.debug("Removed component", kind=self.kind, code=code, size=len(self._items))
        return found

    def find_all(self) -> List[T]:
        return list(self._items)

    def exists(self, code: str) -> bool:
        return self.find(code) is not None

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.exists(code)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
