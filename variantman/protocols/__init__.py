"""Variantman protocols."""

from variantman.protocols.catalog import (
    CatalogOption,
    Option,
    OptionKind,
    OptionRow,
    OptionValueState,
    Product,
    Variant,
    ViewState,
)
from variantman.protocols.cart import CartBackend

__all__ = [
    "CartBackend",
    "CatalogOption",
    "Option",
    "OptionKind",
    "OptionRow",
    "OptionValueState",
    "Product",
    "Variant",
    "ViewState",
]
