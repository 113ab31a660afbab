"""Billing statements for theatrical performance invoices."""

__version__ = "0.3.0"

from .catalog import Catalog
from .errors import (
    ConfigurationError,
    InvalidAudienceError,
    InvoiceFormatError,
    TheaterError,
    UnknownPlayError,
    UnsupportedGenreError,
)
from .pricing import amount_for, credits_for
from .statement import Statement, build_statement, render, render_plain_text
from .types import Genre, Invoice, Performance, Play

__all__ = [
    "__version__",
    "Catalog",
    "ConfigurationError",
    "Genre",
    "InvalidAudienceError",
    "Invoice",
    "InvoiceFormatError",
    "Performance",
    "Play",
    "Statement",
    "TheaterError",
    "UnknownPlayError",
    "UnsupportedGenreError",
    "amount_for",
    "build_statement",
    "credits_for",
    "render",
    "render_plain_text",
]
