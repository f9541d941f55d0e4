"""
Signal CartBackend -- default cart handoff.

Publishes every permitted add-to-cart as the add_to_cart_requested
signal, so the host project can connect its cart without configuring
a backend class.

Usage in settings.py:
    VARIANTMAN = {
        "CART_BACKEND": "variantman.adapters.signal.SignalCartBackend",
    }

This is equivalent to leaving CART_BACKEND unset (None).
"""

from __future__ import annotations

import logging

from variantman.protocols.cart import CartBackend
from variantman.protocols.catalog import Product, Variant

logger = logging.getLogger(__name__)


class SignalCartBackend:
    """CartBackend that sends add_to_cart_requested and stores nothing."""

    def add_item(self, product: Product, item: Product | Variant, qty: int) -> None:
        from variantman.service import ProductView
        from variantman.signals import add_to_cart_requested

        logger.info("Add to cart requested: product=%s item=%s qty=%d", product.id, item.id, qty)
        add_to_cart_requested.send(sender=ProductView, product=product, item=item, qty=qty)


# Verify protocol compliance at import time.
if not isinstance(SignalCartBackend(), CartBackend):
    raise TypeError("SignalCartBackend does not implement CartBackend protocol")
