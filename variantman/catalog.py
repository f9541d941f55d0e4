"""
Option catalog: options normalized for presentation.

Built once per product. Options named like a color (see
VARIANTMAN["SWATCH_OPTION_NAMES"]) are tagged OptionKind.SWATCH and carry
a value -> color map merged from the option's declared swatches and the
variants' swatch metadata. Declared swatches win over variant metadata.
"""

import logging
from collections import Counter
from types import MappingProxyType

from variantman.conf import variantman_settings
from variantman.protocols.catalog import CatalogOption, Option, OptionKind, Product

logger = logging.getLogger(__name__)


def is_swatch_option(name: str) -> bool:
    names = {n.lower() for n in variantman_settings.SWATCH_OPTION_NAMES}
    return name.lower() in names


def _collect_swatches(product: Product, option: Option) -> dict[str, str]:
    swatches: dict[str, str] = {}
    for variant in product.variants:
        value = variant.options.get(option.name)
        if variant.swatch and value in option.values:
            swatches.setdefault(value, variant.swatch)
    for value, color in option.swatches.items():
        if value in option.values and color:
            swatches[value] = color
    return swatches


def build_option(product: Product, option: Option) -> CatalogOption:
    if not is_swatch_option(option.name):
        return CatalogOption(name=option.name, values=tuple(option.values), id=option.id)
    return CatalogOption(
        name=option.name,
        values=tuple(option.values),
        kind=OptionKind.SWATCH,
        swatches=MappingProxyType(_collect_swatches(product, option)),
        id=option.id,
    )


def build_catalog(product: Product) -> tuple[CatalogOption, ...]:
    """
    Normalize the product's options, in declaration order.

    Duplicate variant combinations are reported here once; resolution
    itself stays safe (duplicates never resolve to a single match).
    """
    combos = Counter(frozenset(v.options.items()) for v in product.variants)
    duplicates = [dict(combo) for combo, count in combos.items() if count > 1]
    if duplicates:
        logger.warning(
            "Product %s has %d duplicated variant combination(s): %s",
            product.id, len(duplicates), duplicates,
        )
    return tuple(build_option(product, option) for option in product.options)
