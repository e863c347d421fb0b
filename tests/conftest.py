import pytest
from storefront.application.catalog_service import CatalogApplicationService
from storefront.domain.catalog.bundle import ProductBundle
from storefront.domain.catalog.facade import ProductFacade
from storefront.domain.catalog.product import Product


@pytest.fixture
def widget():
    return Product(code="A", name="Widget", price=100)


@pytest.fixture
def gadget():
    return Product(code="C", name="Gadget", price=50)


@pytest.fixture
def starter_pack():
    return ProductBundle(code="B1", name="Starter Pack")


@pytest.fixture
def facade():
    return ProductFacade()


@pytest.fixture
def catalog_service(facade):
    return CatalogApplicationService(facade=facade)
