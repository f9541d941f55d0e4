"""Pytest fixtures for Variantman tests."""

from decimal import Decimal

import pytest

from variantman.protocols import Option, Product, Variant


@pytest.fixture(autouse=True)
def reset_cart_backend():
    """Each test starts without a cached cart backend."""
    from variantman.conf import reset_cart_backend

    reset_cart_backend()
    yield
    reset_cart_backend()


def make_variant(vid, color, size, price="100", stock=5, **kwargs):
    return Variant(
        id=vid,
        product_id="SHOE",
        options={"Color": color, "Size": size},
        price=Decimal(price) if price is not None else None,
        stock=stock,
        **kwargs,
    )


@pytest.fixture
def shoe_variants():
    """(Red, 38), (Red, 39), (Blue, 38) -- no (Blue, 39)."""
    return (
        make_variant("RED-38", "Red", "38", image="red-38.jpg"),
        make_variant("RED-39", "Red", "39", price="110"),
        make_variant("BLUE-38", "Blue", "38", price="90", swatch="#0000ff"),
    )


@pytest.fixture
def shoe(shoe_variants):
    """Shoe with Color x Size options."""
    return Product(
        id="SHOE",
        slug="ballerina",
        title="Ballerina",
        price=Decimal("100"),
        description="<p>Soft <strong>leather</strong> flats</p>",
        compare_at_price=Decimal("150"),
        images=("ballerina.jpg", "ballerina-side.jpg"),
        featured=True,
        options=(
            Option(name="Color", values=("Red", "Blue"), swatches={"Red": "#ff0000"}),
            Option(name="Size", values=("38", "39")),
        ),
        variants=shoe_variants,
    )


@pytest.fixture
def plain_product():
    """Variant-less product: price 100, compare-at 125."""
    return Product(
        id="BAG",
        slug="tote-bag",
        title="Tote Bag",
        price=Decimal("100"),
        compare_at_price=Decimal("125"),
    )


@pytest.fixture
def single_variant_product():
    """Product with exactly one variant."""
    return Product(
        id="SCARF",
        slug="scarf",
        title="Scarf",
        price=Decimal("40"),
        options=(Option(name="Size", values=("One Size",)),),
        variants=(
            Variant(
                id="SCARF-OS",
                product_id="SCARF",
                options={"Size": "One Size"},
                price=Decimal("35"),
                stock=2,
            ),
        ),
    )
