"""Application layer - use cases over the catalog domain."""

from .catalog_service import CATALOG_KINDS, CatalogApplicationService
from .dto import BaseDTO, CatalogEntryDTO

__all__ = ["CatalogApplicationService", "CATALOG_KINDS", "BaseDTO", "CatalogEntryDTO"]
