"""
Displayed price, strikethrough price and discount badge.

The resolved variant's prices take precedence; without one, the product's
own prices are shown.
"""

from decimal import ROUND_HALF_UP, Decimal

from variantman.monetary import to_decimal
from variantman.protocols.catalog import Product, Variant


def current_price(product: Product, variant: Variant | None = None) -> Decimal:
    """Price to display. A resolved variant without a price counts as 0."""
    if variant is not None:
        return to_decimal(variant.price) if variant.price is not None else Decimal("0")
    return to_decimal(product.price)


def current_compare_at(product: Product, variant: Variant | None = None) -> Decimal | None:
    """Compare-at price to strike through, if any."""
    if variant is not None and variant.compare_at_price is not None:
        return to_decimal(variant.compare_at_price)
    if product.compare_at_price is not None:
        return to_decimal(product.compare_at_price)
    return None


def discount_percentage(price: Decimal, compare_at: Decimal | None) -> int | None:
    """
    Whole-percent discount of price below compare_at.

    Returns None (no badge) unless compare_at is positive and above price.
    A real discount under half a percent rounds to 0, which is still a
    discount; None means there is none.
    """
    if compare_at is None or compare_at <= 0 or compare_at <= price:
        return None
    percent = (compare_at - price) / compare_at * 100
    return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
