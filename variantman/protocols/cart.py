"""
CartBackend protocol.

Lets the host project receive add-to-cart requests without Variantman
knowing how carts are stored.

Usage:
    # In settings.py
    VARIANTMAN = {
        "CART_BACKEND": "shop.adapters.variantman.SessionCartBackend",
    }

    # The host project implements the adapter:
    class SessionCartBackend:
        def add_item(self, product, item, qty):
            cart = Cart.for_request(get_current_request())
            cart.add(product.id, getattr(item, "id", product.id), qty)
"""

from typing import Protocol, runtime_checkable

from variantman.protocols.catalog import Product, Variant


@runtime_checkable
class CartBackend(Protocol):
    """
    Interface for handing a purchasable item to the cart.

    Variantman only decides whether the call is permitted; persisting
    the cart is the backend's job.
    """

    def add_item(self, product: Product, item: Product | Variant, qty: int) -> None:
        """
        Add item to the cart.

        Args:
            product: Product being viewed
            item: Resolved Variant, or the Product itself when variant-less
            qty: Quantity (always 1 from the product view)
        """
        ...
