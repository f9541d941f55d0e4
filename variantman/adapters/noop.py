"""
Noop CartBackend -- for read-only storefronts and previews.

Accepts every add-to-cart request and drops it. No signal is sent.

Usage in settings.py:
    VARIANTMAN = {
        "CART_BACKEND": "variantman.adapters.noop.NoopCartBackend",
    }
"""

from __future__ import annotations

import logging

from variantman.protocols.cart import CartBackend
from variantman.protocols.catalog import Product, Variant

logger = logging.getLogger(__name__)


class NoopCartBackend:
    """CartBackend that discards every item."""

    def add_item(self, product: Product, item: Product | Variant, qty: int) -> None:
        """Log and discard."""
        logger.debug("Discarding add to cart: product=%s item=%s", product.id, item.id)


# Verify protocol compliance at import time.
if not isinstance(NoopCartBackend(), CartBackend):
    raise TypeError("NoopCartBackend does not implement CartBackend protocol")
