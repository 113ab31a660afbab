"""Statement building and plain-text rendering for invoices."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from .catalog import Catalog
from .config import Config
from .formatting import format_currency
from .pricing import MINOR_UNITS_PER_MAJOR, PerformanceCharge, price_performance
from .types import Invoice

logger = logging.getLogger(__name__)

__all__ = ["Statement", "build_statement", "render", "render_plain_text"]


@dataclass(frozen=True)
class Statement:
    """Priced invoice.

    Invariant: ``total_amount`` and ``total_credits`` are the sums over
    ``lines``; line order follows the invoice.
    """

    customer: str
    lines: Tuple[PerformanceCharge, ...]

    @property
    def total_amount(self) -> int:
        return sum(line.amount for line in self.lines)

    @property
    def total_credits(self) -> int:
        return sum(line.credits for line in self.lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "customer": self.customer,
            "performances": [
                {
                    "play": line.play.name,
                    "audience": line.audience,
                    "amount": line.amount,
                    "credits": line.credits,
                }
                for line in self.lines
            ],
            "total_amount": self.total_amount,
            "total_credits": self.total_credits,
        }


def build_statement(invoice: Invoice, catalog: Catalog) -> Statement:
    """Price every performance of ``invoice``.

    Raises:
        UnknownPlayError: if a performance references a play missing from ``catalog``.
        UnsupportedGenreError: if a play's genre has no pricing rule.
    """
    lines = tuple(
        price_performance(catalog.lookup(performance.play_id), performance)
        for performance in invoice.performances
    )
    logger.debug("Built statement for %s with %d performances", invoice.customer, len(lines))
    return Statement(customer=invoice.customer, lines=lines)


def _to_major_units(amount: int) -> Decimal:
    return Decimal(amount) / MINOR_UNITS_PER_MAJOR


def render_plain_text(statement: Statement, config: Optional[Config] = None) -> str:
    config = config or Config()

    def usd(amount: int) -> str:
        return format_currency(_to_major_units(amount), currency=config.currency, locale=config.locale)

    rows = [f"Statement for {statement.customer}"]
    for line in statement.lines:
        rows.append(f"  {line.play.name}: {usd(line.amount)} ({line.audience} seats)")
    rows.append(f"Amount owed is {usd(statement.total_amount)}")
    rows.append(f"You earned {statement.total_credits} credits")

    sep = config.line_separator
    return sep.join(rows) + sep


def render(invoice: Invoice, catalog: Catalog, config: Optional[Config] = None) -> str:
    """Return the formatted statement for ``invoice``.

    Pricing failures propagate and no partial statement is returned.
    """
    return render_plain_text(build_statement(invoice, catalog), config)
