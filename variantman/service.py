"""
Variantman public API.

STATELESS (explicit product + selection):
    VariantService.resolve(product, selection)         - Matching variant
    VariantService.is_available(product, name, value, selection)
    VariantService.price(product, selection)           - (price, compare_at, discount)
    VariantService.can_add_to_cart(product, selection) - Eligibility

PER PRODUCT VIEW (owns the selection):
    view = ProductView(product)
    view.handle_option_change("Color", "Blue")
    view.matching_variant, view.current_price, view.can_add_to_cart, ...
    view.handle_add_to_cart()
"""

import logging
from collections.abc import Mapping
from decimal import Decimal

from django.utils.html import strip_tags

from variantman import availability, eligibility, pricing, resolver
from variantman.catalog import build_catalog
from variantman.conf import get_cart_backend
from variantman.monetary import format_money
from variantman.protocols.catalog import (
    CatalogOption,
    OptionRow,
    Product,
    Variant,
    ViewState,
)
from variantman.selection import Selection

logger = logging.getLogger(__name__)


class VariantService:
    """
    Stateless derivations over (product, selection).

    Uses @classmethod for extensibility; every method is pure.
    """

    @classmethod
    def variants(cls, product: Product) -> tuple[Variant, ...]:
        """Variants taking part in resolution (none for degraded products)."""
        if not eligibility.has_variants(product):
            return ()
        return product.variants

    @classmethod
    def resolve(cls, product: Product, selection: Mapping[str, str]) -> Variant | None:
        return resolver.resolve(cls.variants(product), selection)

    @classmethod
    def is_available(
        cls,
        product: Product,
        option_name: str,
        value: str,
        selection: Mapping[str, str],
    ) -> bool:
        return availability.is_option_value_available(
            option_name, value, cls.variants(product), selection
        )

    @classmethod
    def price(
        cls, product: Product, selection: Mapping[str, str]
    ) -> tuple[Decimal, Decimal | None, int | None]:
        """
        Returns:
            (current_price, current_compare_at, discount_percentage)
        """
        variant = cls.resolve(product, selection)
        price = pricing.current_price(product, variant)
        compare_at = pricing.current_compare_at(product, variant)
        return price, compare_at, pricing.discount_percentage(price, compare_at)

    @classmethod
    def can_add_to_cart(cls, product: Product, selection: Mapping[str, str]) -> bool:
        return eligibility.can_add_to_cart(product, cls.resolve(product, selection))

    @classmethod
    def display_image(cls, product: Product, variant: Variant | None) -> str | None:
        """Variant image override, else the product's first image."""
        if variant is not None and variant.image:
            return variant.image
        return product.images[0] if product.images else None


class ProductView:
    """
    One presented product and its selection.

    Derived state is recomputed from the selection on every read; the
    selection is the only state kept. Views never share selections.
    """

    service = VariantService

    def __init__(self, product: Product, cart_backend=None):
        self.product = product
        self._selection = Selection(product)
        self._cart_backend = cart_backend
        self.options: tuple[CatalogOption, ...] = build_catalog(product)
        if bool(product.options) != bool(product.variants):
            logger.warning(
                "Product %s has %d option(s) and %d variant(s); treating as variant-less",
                product.id, len(product.options), len(product.variants),
            )

    def __repr__(self):
        return f"<ProductView {self.product.slug} {dict(self.selected)!r}>"

    # ======================================================================
    # SELECTION
    # ======================================================================

    @property
    def selected(self) -> Mapping[str, str]:
        return self._selection.selected

    def handle_option_change(self, option_name: str, value: str) -> bool:
        """Select value for option_name; undeclared pairs are ignored."""
        changed = self._selection.handle_option_change(option_name, value)
        if changed:
            from variantman.signals import selection_changed

            selection_changed.send(
                sender=self.__class__,
                view=self,
                option_name=option_name,
                value=value,
                selected=self.selected,
            )
        return changed

    def reset(self) -> None:
        self._selection.reset()

    def is_option_value_available(self, option_name: str, value: str) -> bool:
        return self.service.is_available(self.product, option_name, value, self.selected)

    def option_rows(self, hide_sold_out: bool | None = None) -> list[OptionRow]:
        return availability.option_rows(
            self.options, self.service.variants(self.product), self.selected, hide_sold_out
        )

    # ======================================================================
    # DERIVED STATE
    # ======================================================================

    @property
    def matching_variant(self) -> Variant | None:
        return self.service.resolve(self.product, self.selected)

    @property
    def has_variants(self) -> bool:
        return eligibility.has_variants(self.product)

    @property
    def in_stock(self) -> bool:
        return eligibility.in_stock(self.product, self.matching_variant)

    @property
    def can_add_to_cart(self) -> bool:
        return eligibility.can_add_to_cart(self.product, self.matching_variant)

    @property
    def current_price(self) -> Decimal:
        return pricing.current_price(self.product, self.matching_variant)

    @property
    def current_compare_at(self) -> Decimal | None:
        return pricing.current_compare_at(self.product, self.matching_variant)

    @property
    def discount_percentage(self) -> int | None:
        return pricing.discount_percentage(self.current_price, self.current_compare_at)

    @property
    def display_image(self) -> str | None:
        return self.service.display_image(self.product, self.matching_variant)

    @property
    def stock_label(self) -> str:
        return str(eligibility.stock_label(self.in_stock))

    @property
    def plain_description(self) -> str:
        return strip_tags(self.product.description or "")

    @property
    def is_featured(self) -> bool:
        return self.product.featured

    def format_money(self, amount) -> str:
        return format_money(amount)

    def state(self) -> ViewState:
        """Everything derived from the current selection, computed once."""
        selected = self.selected
        variant = self.service.resolve(self.product, selected)
        price = pricing.current_price(self.product, variant)
        compare_at = pricing.current_compare_at(self.product, variant)
        is_in_stock = eligibility.in_stock(self.product, variant)
        return ViewState(
            selected=selected,
            matching_variant=variant,
            has_variants=eligibility.has_variants(self.product),
            in_stock=is_in_stock,
            can_add_to_cart=eligibility.can_add_to_cart(self.product, variant),
            current_price=price,
            current_compare_at=compare_at,
            discount_percentage=pricing.discount_percentage(price, compare_at),
            display_image=self.service.display_image(self.product, variant),
            stock_label=str(eligibility.stock_label(is_in_stock)),
        )

    # ======================================================================
    # CART
    # ======================================================================

    def handle_add_to_cart(self) -> bool:
        """
        Hand the resolved item to the cart backend, quantity 1.

        Returns:
            True if the backend was called, False if adding is not
            permitted for the current selection.
        """
        variant = self.matching_variant
        if not eligibility.can_add_to_cart(self.product, variant):
            logger.debug("Add to cart blocked for %s with %r", self.product.id, dict(self.selected))
            return False
        backend = self._cart_backend or get_cart_backend()
        backend.add_item(self.product, variant or self.product, 1)
        return True
