"""
Variantman configuration.

Usage in settings.py:
    VARIANTMAN = {
        "CURRENCY_SYMBOL": "$",
        "LOCALE": "en",
        "SWATCH_OPTION_NAMES": ("color", "colour"),
        "CART_BACKEND": None,  # e.g. "shop.adapters.variantman.SessionCartBackend"
    }
"""

import importlib
import threading
from dataclasses import dataclass
from typing import Any

from django.conf import settings

from variantman.exceptions import VariantError


@dataclass
class VariantmanSettings:
    """Variantman configuration settings."""

    CURRENCY_SYMBOL: str = "$"
    CURRENCY_CODE: str = "USD"
    LOCALE: str = "en"
    DECIMAL_PLACES: int = 2
    SWATCH_OPTION_NAMES: tuple[str, ...] = ("color",)
    HIDE_SOLD_OUT_VALUES: bool = True
    CART_BACKEND: str | None = None


def get_variantman_settings() -> VariantmanSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "VARIANTMAN", {})
    return VariantmanSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_variantman_settings(), name)


variantman_settings = _LazySettings()


# CartBackend singleton
_cart_backend_lock = threading.Lock()
_cart_backend_instance = None


def get_cart_backend():
    """
    Return the configured CartBackend instance.

    Loads from VARIANTMAN["CART_BACKEND"] setting (dotted path), falling
    back to SignalCartBackend when unset.
    If _cart_backend_instance was set directly (e.g. in tests), returns it as-is.

    Raises:
        VariantError: INVALID_CART_BACKEND if the dotted path cannot be imported
    """
    global _cart_backend_instance
    if _cart_backend_instance is not None:
        return _cart_backend_instance
    backend_path = variantman_settings.CART_BACKEND or (
        "variantman.adapters.signal.SignalCartBackend"
    )
    with _cart_backend_lock:
        if _cart_backend_instance is None:
            try:
                module_path, cls_name = backend_path.rsplit(".", 1)
                module = importlib.import_module(module_path)
                cls = getattr(module, cls_name)
            except (ValueError, ImportError, AttributeError) as exc:
                raise VariantError(
                    "INVALID_CART_BACKEND", path=backend_path, error=str(exc)
                ) from exc
            _cart_backend_instance = cls()
    return _cart_backend_instance


def reset_cart_backend():
    """Reset CartBackend singleton (for tests)."""
    global _cart_backend_instance
    _cart_backend_instance = None
