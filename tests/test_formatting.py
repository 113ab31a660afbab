from decimal import Decimal

import pytest

from theater.errors import ConfigurationError
from theater.formatting import format_currency


@pytest.mark.parametrize(
    "amount, currency, locale, expected",
    [
        (Decimal("650"), "USD", "en_US", "$650.00"),
        (Decimal("1160"), "USD", "en_US", "$1,160.00"),
        (Decimal("1234567.5"), "USD", "en_US", "$1,234,567.50"),
        (Decimal("1160"), "EUR", "de_DE", "€1.160,00"),
        (Decimal("1160"), "GBP", "fr_FR", "£1 160,00"),
        (Decimal("0"), "USD", "en_US", "$0.00"),
        (Decimal("-5"), "USD", "en_US", "-$5.00"),
        (Decimal("12.5"), "CHF", "en_US", "CHF 12.50"),
    ],
)
def test_format_currency(amount, currency, locale, expected):
    assert format_currency(amount, currency=currency, locale=locale) == expected


def test_unknown_locale_is_rejected():
    with pytest.raises(ConfigurationError, match="Unsupported locale"):
        format_currency(Decimal("1"), locale="xx_XX")
