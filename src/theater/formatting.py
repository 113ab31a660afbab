"""Currency display for statement amounts."""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Tuple

from .errors import ConfigurationError

CURRENCY_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

# (thousands separator, decimal separator)
LOCALE_SEPARATORS: Dict[str, Tuple[str, str]] = {
    "en_US": (",", "."),
    "de_DE": (".", ","),
    "fr_FR": (" ", ","),
}


def format_currency(amount: Decimal, currency: str = "USD", locale: str = "en_US") -> str:
    """Format a major-unit amount with currency symbol and locale separators.

    ``format_currency(Decimal("1160"))`` gives ``"$1,160.00"``.
    """
    try:
        thousands, decimal_point = LOCALE_SEPARATORS[locale]
    except KeyError:
        raise ConfigurationError(f"Unsupported locale: {locale}") from None

    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    sign = "-" if amount < 0 else ""
    digits = f"{abs(amount):,.2f}"
    digits = digits.replace(",", "X").replace(".", decimal_point).replace("X", thousands)
    return f"{sign}{symbol}{digits}"
