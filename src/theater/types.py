"""Immutable value types shared by the catalog, pricing and statement layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Tuple, Union


class Genre(str, Enum):
    """Pricing category of a play."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def coerce(cls, value: str) -> Union["Genre", str]:
        """Return the matching member, or the raw string when no member matches.

        Unknown genres are kept as-is so pricing can reject them explicitly.
        """
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True)
class Play:
    name: str
    genre: Union[Genre, str]


@dataclass(frozen=True)
class Performance:
    """One showing of a play on an invoice.

    The play is referenced by id only and resolved through a catalog.
    """

    play_id: str
    audience: int


@dataclass(frozen=True)
class Invoice:
    customer: str
    performances: Tuple[Performance, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.performances, tuple):
            object.__setattr__(self, "performances", tuple(self.performances))

    @classmethod
    def of(cls, customer: str, performances: Iterable[Performance]) -> "Invoice":
        return cls(customer=customer, performances=tuple(performances))
