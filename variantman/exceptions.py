"""Variantman exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "INVALID_PRODUCT": "Invalid product data",
    "INVALID_OPTION": "Invalid option data",
    "INVALID_VARIANT": "Invalid variant data",
    "INVALID_CART_BACKEND": "Cart backend could not be loaded",
}


class VariantError(Exception):
    """
    Structured exception raised at the edges of the engine.

    Resolution, availability and pricing never raise; only loading
    catalog payloads and wiring collaborators do.

    Usage:
        try:
            product = product_from_dict(payload)
        except VariantError as e:
            if e.code == "INVALID_PRODUCT":
                logger.warning("Bad payload for %s: %s", e.product_id, e.message)
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    @property
    def product_id(self) -> str | None:
        return self.data.get("product_id")

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }
