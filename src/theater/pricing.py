"""Per-genre pricing and volume credit rules.

Rules are table data keyed by :class:`Genre`. Adding a genre means adding a
``PricingRule`` row; a genre without a row is rejected with
:class:`UnsupportedGenreError` instead of being priced at zero.

All amounts are integers in minor currency units (cents).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Union

from .errors import UnsupportedGenreError
from .types import Genre, Performance, Play

__all__ = [
    "PRICING_RULES",
    "PerformanceCharge",
    "PricingRule",
    "amount_for",
    "credits_for",
    "price_performance",
    "rule_for",
]

MINOR_UNITS_PER_MAJOR = 100

TRAGEDY_BASE = 40000
TRAGEDY_THRESHOLD = 30
PER_PERSON_OVER = 1000

COMEDY_BASE = 30000
COMEDY_THRESHOLD = 20
COMEDY_OVER_FLAT = 10000
COMEDY_OVER_PER_PERSON = 500
COMEDY_PER_AUDIENCE = 300

BASE_VOLUME_CREDIT_THRESHOLD = 30
COMEDY_EXTRA_VOLUME_DIVISOR = 5


def _no_bonus_credits(audience: int) -> int:
    return 0


@dataclass(frozen=True)
class PricingRule:
    """Amount and bonus-credit functions for one genre."""

    amount: Callable[[int], int]
    bonus_credits: Callable[[int], int] = _no_bonus_credits


def _tragedy_amount(audience: int) -> int:
    result = TRAGEDY_BASE
    if audience > TRAGEDY_THRESHOLD:
        result += PER_PERSON_OVER * (audience - TRAGEDY_THRESHOLD)
    return result


def _comedy_amount(audience: int) -> int:
    result = COMEDY_BASE
    if audience > COMEDY_THRESHOLD:
        result += COMEDY_OVER_FLAT + COMEDY_OVER_PER_PERSON * (audience - COMEDY_THRESHOLD)
    # applies below the threshold too
    result += COMEDY_PER_AUDIENCE * audience
    return result


def _comedy_bonus_credits(audience: int) -> int:
    return audience // COMEDY_EXTRA_VOLUME_DIVISOR


PRICING_RULES: Mapping[Genre, PricingRule] = MappingProxyType(
    {
        Genre.TRAGEDY: PricingRule(amount=_tragedy_amount),
        Genre.COMEDY: PricingRule(amount=_comedy_amount, bonus_credits=_comedy_bonus_credits),
    }
)


def rule_for(genre: Union[Genre, str]) -> PricingRule:
    """Return the pricing rule for ``genre``.

    Raises:
        UnsupportedGenreError: if no rule is registered for the genre.
    """
    rule = PRICING_RULES.get(Genre.coerce(genre))
    if rule is None:
        raise UnsupportedGenreError(genre)
    return rule


def amount_for(play: Play, audience: int) -> int:
    """Amount owed, in minor units, for one performance of ``play``."""
    return rule_for(play.genre).amount(audience)


def credits_for(play: Play, audience: int) -> int:
    """Volume credits earned by one performance of ``play``."""
    rule = rule_for(play.genre)
    return max(audience - BASE_VOLUME_CREDIT_THRESHOLD, 0) + rule.bonus_credits(audience)


@dataclass(frozen=True)
class PerformanceCharge:
    """Priced line of a statement."""

    play: Play
    audience: int
    amount: int
    credits: int


def price_performance(play: Play, performance: Performance) -> PerformanceCharge:
    return PerformanceCharge(
        play=play,
        audience=performance.audience,
        amount=amount_for(play, performance.audience),
        credits=credits_for(play, performance.audience),
    )
