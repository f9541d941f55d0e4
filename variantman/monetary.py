"""Money formatting."""

from decimal import ROUND_HALF_UP, Decimal

from django.utils import translation
from django.utils.formats import number_format

from variantman.conf import variantman_settings


def to_decimal(amount) -> Decimal:
    """Convert int/float/str/Decimal to Decimal without float noise."""
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def format_money(amount) -> str:
    """
    Render amount with the configured currency symbol and locale.

    No conversion is done; the amount is only rounded (half up) to
    VARIANTMAN["DECIMAL_PLACES"] and grouped per VARIANTMAN["LOCALE"].

        >>> format_money(Decimal("1234.5"))
        '$1,234.50'
        >>> format_money(-5)
        '-$5.00'
    """
    places = variantman_settings.DECIMAL_PLACES
    exp = Decimal(1).scaleb(-places)
    value = to_decimal(amount).quantize(exp, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    with translation.override(variantman_settings.LOCALE):
        number = number_format(abs(value), decimal_pos=places, use_l10n=True, force_grouping=True)
    return f"{sign}{variantman_settings.CURRENCY_SYMBOL}{number}"
