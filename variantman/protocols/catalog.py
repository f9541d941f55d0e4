"""Catalog records consumed by the engine."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType


class OptionKind(str, Enum):
    """How an option's values are rendered."""

    SWATCH = "swatch"
    TEXT = "text"


@dataclass(frozen=True)
class Option:
    """One axis of variation (e.g. Size)."""

    name: str
    values: tuple[str, ...]
    swatches: Mapping[str, str] = field(default_factory=dict)
    id: str | None = None


@dataclass(frozen=True)
class Variant:
    """One concrete, purchasable combination of option values.

    Stock:
    - stock > 0: purchasable
    - stock == 0: exists but sold out

    A missing price is treated as zero by the pricing functions.
    """

    id: str
    product_id: str
    options: Mapping[str, str]
    price: Decimal | None = None
    compare_at_price: Decimal | None = None
    stock: int = 0
    image: str | None = None
    swatch: str | None = None


@dataclass(frozen=True)
class Product:
    """Catalog entry with its options and variants.

    stock is only meaningful for variant-less products; None means the
    product carries no stock concept and is always in stock.
    """

    id: str
    slug: str
    title: str
    price: Decimal
    description: str = ""
    compare_at_price: Decimal | None = None
    images: tuple[str, ...] = ()
    featured: bool = False
    options: tuple[Option, ...] = ()
    variants: tuple[Variant, ...] = ()
    stock: int | None = None

    def get_option(self, name: str) -> Option | None:
        for option in self.options:
            if option.name == name:
                return option
        return None


@dataclass(frozen=True)
class CatalogOption:
    """Option normalized for presentation."""

    name: str
    values: tuple[str, ...]
    kind: OptionKind = OptionKind.TEXT
    swatches: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    id: str | None = None

    @property
    def is_swatch(self) -> bool:
        return self.kind is OptionKind.SWATCH

    def swatch_for(self, value: str) -> str | None:
        """Swatch color for value, or None to render a text label."""
        if not self.is_swatch:
            return None
        return self.swatches.get(value)


@dataclass(frozen=True)
class OptionValueState:
    """Presentation state of one value button.

    - exists: some variant has this value combined with the rest of the selection
    - is_available: ... and at least one of them is in stock
    - is_dimmed: another value of the same option is selected
    """

    value: str
    swatch: str | None
    is_selected: bool
    is_available: bool
    exists: bool
    is_dimmed: bool


@dataclass(frozen=True)
class OptionRow:
    """One option with the values to render for it."""

    option: CatalogOption
    values: tuple[OptionValueState, ...]

    @property
    def name(self) -> str:
        return self.option.name


@dataclass(frozen=True)
class ViewState:
    """Snapshot of everything derived from the current selection."""

    selected: Mapping[str, str]
    matching_variant: Variant | None
    has_variants: bool
    in_stock: bool
    can_add_to_cart: bool
    current_price: Decimal
    current_compare_at: Decimal | None
    discount_percentage: int | None
    display_image: str | None
    stock_label: str
