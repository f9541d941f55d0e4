"""Stock state and add-to-cart gating."""

from django.utils.translation import gettext_lazy as _

from variantman.protocols.catalog import Product, Variant


def has_variants(product: Product) -> bool:
    """
    True if the product is sold through variants.

    Options without variants (or variants without options) break the
    catalog invariant; such products are treated as variant-less.
    """
    return bool(product.variants) and bool(product.options)


def in_stock(product: Product, variant: Variant | None = None) -> bool:
    if variant is not None:
        return variant.stock > 0
    if has_variants(product):
        return False
    if product.stock is None:
        return True
    return product.stock > 0


def can_add_to_cart(product: Product, variant: Variant | None = None) -> bool:
    """Variant products need a resolved variant; everything needs stock."""
    if has_variants(product) and variant is None:
        return False
    return in_stock(product, variant)


def stock_label(is_in_stock: bool) -> str:
    """Label for the add button."""
    return _("Add") if is_in_stock else _("Sold out")
