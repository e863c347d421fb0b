import pytest
from pydantic import ValidationError
from storefront.domain.catalog.bundle import ProductBundle
from storefront.domain.catalog.exceptions import BundleCycleError
from storefront.domain.catalog.product import Product


def test_product_price_and_display(widget):
    assert widget.get_code() == "A"
    assert widget.get_price() == 100
    assert widget.display() == "Product: Widget (Price: $100)"


def test_product_display_keeps_fractional_price():
    product = Product(code="P", name="Pen", price=12.5)
    assert product.display() == "Product: Pen (Price: $12.5)"


def test_product_rejects_negative_price():
    with pytest.raises(ValidationError) as exc:
        Product(code="A", name="Widget", price=-1)
    assert "price" in str(exc.value)


def test_product_rejects_blank_code():
    with pytest.raises(ValidationError):
        Product(code="   ", name="Widget", price=1)


def test_product_is_immutable(widget):
    with pytest.raises(ValidationError):
        widget.price = 5


def test_empty_bundle_has_zero_price(starter_pack):
    assert starter_pack.get_price() == 0
    assert starter_pack.children == ()
    assert starter_pack.display() == "Bundle: Starter Pack"


def test_bundle_price_is_sum_of_children(starter_pack, widget, gadget):
    starter_pack.add(widget)
    starter_pack.add(gadget)

    assert starter_pack.get_price() == widget.get_price() + gadget.get_price()
    assert starter_pack.get_price() == 150


def test_bundle_keeps_insertion_order_and_duplicates(starter_pack, widget, gadget):
    starter_pack.add(gadget)
    starter_pack.add(widget)
    starter_pack.add(gadget)

    assert [c.get_code() for c in starter_pack.children] == ["C", "A", "C"]
    assert starter_pack.get_price() == 200


def test_bundle_display_indents_children(starter_pack, widget, gadget):
    starter_pack.add(widget)
    starter_pack.add(gadget)

    assert starter_pack.display() == (
        "Bundle: Starter Pack\n"
        "  Product: Widget (Price: $100)\n"
        "  Product: Gadget (Price: $50)"
    )


def test_nested_bundle_price_and_display(starter_pack, widget, gadget):
    starter_pack.add(widget)
    outer = ProductBundle(code="B2", name="Deluxe Pack")
    outer.add(starter_pack)
    outer.add(gadget)

    assert outer.get_price() == 150
    assert outer.display() == (
        "Bundle: Deluxe Pack\n"
        "  Bundle: Starter Pack\n"
        "    Product: Widget (Price: $100)\n"
        "  Product: Gadget (Price: $50)"
    )


@pytest.mark.parametrize("depth", [1, 5, 10])
def test_deeply_nested_bundle_price(depth, widget):
    inner = ProductBundle(code="L0", name="Level 0")
    inner.add(widget)
    for level in range(1, depth + 1):
        outer = ProductBundle(code=f"L{level}", name=f"Level {level}")
        outer.add(inner)
        outer.add(widget)
        inner = outer

    assert inner.get_price() == pytest.approx(100 * (depth + 1))
    assert inner.display().count("Widget") == depth + 1


def test_bundle_cannot_contain_itself(starter_pack):
    with pytest.raises(BundleCycleError):
        starter_pack.add(starter_pack)
    assert starter_pack.children == ()


def test_bundle_cannot_contain_an_ancestor(starter_pack, widget):
    middle = ProductBundle(code="B2", name="Middle")
    outer = ProductBundle(code="B3", name="Outer")
    middle.add(starter_pack)
    outer.add(middle)

    with pytest.raises(BundleCycleError) as exc:
        starter_pack.add(outer)
    assert exc.value.bundle_code == "B1"
    assert exc.value.child_code == "B3"
    assert starter_pack.children == ()


def test_same_bundle_may_appear_in_two_siblings(starter_pack, widget):
    starter_pack.add(widget)
    outer = ProductBundle(code="B2", name="Twice")
    outer.add(starter_pack)
    outer.add(starter_pack)

    assert outer.get_price() == 200


def test_contains_looks_through_nesting(starter_pack, widget, gadget):
    starter_pack.add(widget)
    outer = ProductBundle(code="B2", name="Outer")
    outer.add(starter_pack)

    assert outer.contains(widget)
    assert outer.contains(starter_pack)
    assert not outer.contains(gadget)
    assert not widget.contains(widget)
