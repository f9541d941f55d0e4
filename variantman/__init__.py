"""
Django Variantman - Variant resolution and pricing.

Usage:
    from variantman import ProductView, VariantError

    view = ProductView(product)
    view.handle_option_change("Color", "Blue")
    if view.can_add_to_cart:
        view.handle_add_to_cart()
"""


def __getattr__(name):
    if name == "ProductView":
        from variantman.service import ProductView

        return ProductView
    elif name == "VariantService":
        from variantman.service import VariantService

        return VariantService
    elif name == "VariantError":
        from variantman.exceptions import VariantError

        return VariantError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["ProductView", "VariantService", "VariantError"]
__version__ = "0.1.0"
