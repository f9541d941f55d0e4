"""
Build catalog records from plain mappings.

Accepts the payload shape of the catalog collaborator (camelCase keys such
as compareAtPrice and productId) as well as snake_case keys.

Usage:
    product = product_from_dict({
        "id": "p1",
        "slug": "ballerina",
        "title": "Ballerina",
        "price": 100,
        "compareAtPrice": 125,
        "options": [{"name": "Size", "values": ["38", "39"]}],
        "variants": [
            {"id": "v1", "options": {"Size": "38"}, "price": 100, "stock": 3},
        ],
    })
"""

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any

from variantman.exceptions import VariantError
from variantman.monetary import to_decimal
from variantman.protocols.catalog import Option, Product, Variant

logger = logging.getLogger(__name__)


def _get(data: Mapping[str, Any], *keys: str, default=None):
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


def _money(value, code: str, **context) -> Decimal | None:
    if value is None or value == "":
        return None
    try:
        return to_decimal(value)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise VariantError(code, f"Invalid amount: {value!r}", **context) from exc


def _stock(value, code: str, **context) -> int:
    try:
        stock = int(value)
    except (ValueError, TypeError) as exc:
        raise VariantError(code, f"Invalid stock: {value!r}", **context) from exc
    return max(stock, 0)


def option_from_dict(data: Mapping[str, Any]) -> Option:
    """
    Raises:
        VariantError: INVALID_OPTION if name is missing
    """
    name = _get(data, "name")
    if not name:
        raise VariantError("INVALID_OPTION", "Option name is required", option=dict(data))

    values: list[str] = []
    for value in _get(data, "values", default=()):
        value = str(value)
        if value not in values:
            values.append(value)

    swatches = {str(k): str(v) for k, v in _get(data, "swatches", default={}).items() if v}
    option_id = _get(data, "id")
    return Option(
        name=str(name),
        values=tuple(values),
        swatches=MappingProxyType(swatches),
        id=str(option_id) if option_id is not None else None,
    )


def variant_from_dict(data: Mapping[str, Any], product_id: str | None = None) -> Variant:
    """
    Raises:
        VariantError: INVALID_VARIANT if id is missing or an amount is malformed
    """
    variant_id = _get(data, "id")
    if variant_id is None:
        raise VariantError("INVALID_VARIANT", "Variant id is required", product_id=product_id)

    owner = _get(data, "product_id", "productId", default=product_id)
    context = {"product_id": owner, "variant_id": str(variant_id)}
    options = {str(k): str(v) for k, v in _get(data, "options", default={}).items()}
    return Variant(
        id=str(variant_id),
        product_id=str(owner) if owner is not None else "",
        options=MappingProxyType(options),
        price=_money(_get(data, "price"), "INVALID_VARIANT", **context),
        compare_at_price=_money(
            _get(data, "compare_at_price", "compareAtPrice"), "INVALID_VARIANT", **context
        ),
        stock=_stock(
            _get(data, "stock", "inventory_quantity", "inventoryQuantity", default=0),
            "INVALID_VARIANT",
            **context,
        ),
        image=_get(data, "image"),
        swatch=_get(data, "swatch", "color_hex", "colorHex"),
    )


def product_from_dict(data: Mapping[str, Any]) -> Product:
    """
    Build a Product with its options and variants.

    Raises:
        VariantError: INVALID_PRODUCT if id or title is missing or the
            price is malformed; INVALID_OPTION / INVALID_VARIANT from nested
            records.
    """
    product_id = _get(data, "id")
    title = _get(data, "title", "name")
    if product_id is None or not title:
        raise VariantError("INVALID_PRODUCT", "Product id and title are required", product_id=product_id)
    product_id = str(product_id)

    price = _money(_get(data, "price"), "INVALID_PRODUCT", product_id=product_id)
    stock = _get(data, "stock")
    options = tuple(option_from_dict(o) for o in _get(data, "options", default=()))
    variants = tuple(variant_from_dict(v, product_id) for v in _get(data, "variants", default=()))

    product = Product(
        id=product_id,
        slug=str(_get(data, "slug", default=product_id)),
        title=str(title),
        price=price if price is not None else Decimal("0"),
        description=_get(data, "description", default=""),
        compare_at_price=_money(
            _get(data, "compare_at_price", "compareAtPrice"), "INVALID_PRODUCT", product_id=product_id
        ),
        images=tuple(_get(data, "images", default=())),
        featured=bool(_get(data, "featured", default=False)),
        options=options,
        variants=variants,
        stock=_stock(stock, "INVALID_PRODUCT", product_id=product_id) if stock is not None else None,
    )
    logger.debug(
        "Loaded product %s with %d option(s) and %d variant(s)",
        product.id, len(options), len(variants),
    )
    return product
