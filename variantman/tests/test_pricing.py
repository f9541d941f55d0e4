"""Tests for pricing and money formatting."""

from dataclasses import replace
from decimal import Decimal

import pytest

from variantman.monetary import format_money, to_decimal
from variantman.pricing import current_compare_at, current_price, discount_percentage


class TestCurrentPrice:
    """Tests for current_price() and current_compare_at()."""

    def test_product_fallback(self, plain_product):
        assert current_price(plain_product) == Decimal("100")
        assert current_compare_at(plain_product) == Decimal("125")

    def test_variant_price_wins(self, shoe):
        variant = shoe.variants[2]
        assert current_price(shoe, variant) == Decimal("90")

    def test_variant_without_price_is_zero(self, shoe):
        variant = replace(shoe.variants[0], price=None)
        assert current_price(shoe, variant) == Decimal("0")

    def test_variant_compare_at_wins(self, shoe):
        variant = replace(shoe.variants[0], compare_at_price=Decimal("120"))
        assert current_compare_at(shoe, variant) == Decimal("120")

    def test_variant_without_compare_at_uses_product(self, shoe):
        assert current_compare_at(shoe, shoe.variants[0]) == Decimal("150")

    def test_no_compare_at_anywhere(self, plain_product):
        product = replace(plain_product, compare_at_price=None)
        assert current_compare_at(product) is None


class TestDiscountPercentage:
    """Tests for discount_percentage()."""

    def test_basic(self):
        """(125 - 100) / 125 = 20%."""
        assert discount_percentage(Decimal("100"), Decimal("125")) == 20

    def test_rounds_half_up(self):
        """(200 - 199) / 200 = 0.5% -> 1%."""
        assert discount_percentage(Decimal("199"), Decimal("200")) == 1

    def test_rounds_to_nearest(self):
        """(300 - 100) / 300 = 66.67% -> 67%."""
        assert discount_percentage(Decimal("100"), Decimal("300")) == 67

    def test_absent_without_compare_at(self):
        assert discount_percentage(Decimal("100"), None) is None

    def test_absent_when_compare_at_equal(self):
        """No badge, not 0%."""
        assert discount_percentage(Decimal("100"), Decimal("100")) is None

    def test_absent_when_compare_at_lower(self):
        assert discount_percentage(Decimal("100"), Decimal("80")) is None

    def test_absent_when_compare_at_not_positive(self):
        assert discount_percentage(Decimal("-10"), Decimal("0")) is None

    def test_free_item_is_full_discount(self):
        assert discount_percentage(Decimal("0"), Decimal("50")) == 100


class TestFormatMoney:
    """format_money() renders amounts with symbol, grouping and 2 decimals."""

    def test_basic(self):
        assert format_money(Decimal("12.5")) == "$12.50"

    def test_zero(self):
        assert format_money(0) == "$0.00"

    def test_grouping(self):
        assert format_money(1000000) == "$1,000,000.00"

    def test_rounds_half_up(self):
        assert format_money(Decimal("2.005")) == "$2.01"

    def test_float_input(self):
        assert format_money(19.99) == "$19.99"

    def test_negative(self):
        assert format_money(Decimal("-1250")) == "-$1,250.00"

    def test_locale_and_symbol_from_settings(self, settings):
        settings.VARIANTMAN = {"CURRENCY_SYMBOL": "€", "LOCALE": "de"}
        assert format_money(Decimal("1234.5")) == "€1.234,50"

    def test_decimal_places_from_settings(self, settings):
        settings.VARIANTMAN = {"DECIMAL_PLACES": 0}
        assert format_money(Decimal("1234.5")) == "$1,235"


class TestToDecimal:
    @pytest.mark.parametrize(
        "value, expected",
        [(10, Decimal("10")), ("9.90", Decimal("9.90")), (0.1, Decimal("0.1"))],
    )
    def test_converts(self, value, expected):
        assert to_decimal(value) == expected
