"""Tests for settings, cart backend wiring and VariantError."""

from unittest.mock import MagicMock, patch

import pytest

from variantman import conf
from variantman.adapters import NoopCartBackend, SignalCartBackend
from variantman.exceptions import VariantError
from variantman.protocols import CartBackend


class TestSettings:
    """VARIANTMAN setting is re-read on every access."""

    def test_defaults(self, settings):
        settings.VARIANTMAN = {}
        assert conf.variantman_settings.CURRENCY_SYMBOL == "$"
        assert conf.variantman_settings.DECIMAL_PLACES == 2
        assert conf.variantman_settings.HIDE_SOLD_OUT_VALUES is True
        assert conf.variantman_settings.CART_BACKEND is None

    def test_override(self, settings):
        settings.VARIANTMAN = {"CURRENCY_CODE": "MXN"}
        assert conf.variantman_settings.CURRENCY_CODE == "MXN"

    def test_unknown_key_rejected(self, settings):
        settings.VARIANTMAN = {"NOT_A_SETTING": 1}
        with pytest.raises(TypeError):
            conf.get_variantman_settings()

    def test_patched_settings(self):
        with patch("variantman.conf.get_variantman_settings") as mock_settings:
            mock_settings.return_value = MagicMock(LOCALE="pt-br")
            assert conf.variantman_settings.LOCALE == "pt-br"


class TestCartBackendSingleton:
    """get_cart_backend() loads the dotted path once."""

    def test_default_is_signal_backend(self):
        assert isinstance(conf.get_cart_backend(), SignalCartBackend)

    def test_loads_from_settings(self, settings):
        settings.VARIANTMAN = {"CART_BACKEND": "variantman.adapters.noop.NoopCartBackend"}
        backend = conf.get_cart_backend()
        assert isinstance(backend, NoopCartBackend)
        assert conf.get_cart_backend() is backend

    def test_preset_instance_returned(self):
        mock_backend = MagicMock()
        conf._cart_backend_instance = mock_backend
        assert conf.get_cart_backend() is mock_backend

    def test_invalid_path(self, settings):
        settings.VARIANTMAN = {"CART_BACKEND": "variantman.adapters.nope.Missing"}
        with pytest.raises(VariantError) as exc:
            conf.get_cart_backend()
        assert exc.value.code == "INVALID_CART_BACKEND"
        assert exc.value.data["path"] == "variantman.adapters.nope.Missing"

    def test_adapters_implement_protocol(self):
        assert isinstance(NoopCartBackend(), CartBackend)
        assert isinstance(SignalCartBackend(), CartBackend)


class TestVariantError:
    def test_default_messages(self):
        err = VariantError("INVALID_PRODUCT")
        assert err.message == "Invalid product data"
        assert str(err) == "[INVALID_PRODUCT] Invalid product data"

    def test_custom_message(self):
        err = VariantError("INVALID_PRODUCT", message="Custom message")
        assert err.message == "Custom message"

    def test_unknown_code(self):
        assert VariantError("SOMETHING").message == "SOMETHING"

    def test_as_dict(self):
        err = VariantError("INVALID_VARIANT", product_id="p-1")
        d = err.as_dict()
        assert d["code"] == "INVALID_VARIANT"
        assert d["data"]["product_id"] == "p-1"

    def test_product_id_missing(self):
        assert VariantError("INVALID_OPTION").product_id is None
