"""Structured error taxonomy for statement computation failures."""

from __future__ import annotations

from typing import Any


class TheaterError(Exception):
    """Base class for all theater domain exceptions."""

    def __init__(self, error_code: str, category: str, explanation: str):
        self.error_code = error_code
        self.category = category
        self.explanation = explanation
        super().__init__(f"[{self.category}:{self.error_code}] {self.explanation}")


class UnknownPlayError(TheaterError, LookupError):
    """Raised when a performance references a play id missing from the catalog."""

    def __init__(self, play_id: str):
        self.play_id = play_id
        super().__init__("UNKNOWN_PLAY", "CATALOG", f"unknown play: {play_id}")


class UnsupportedGenreError(TheaterError):
    """Raised when a play's genre has no pricing rule."""

    def __init__(self, genre: Any):
        self.genre = str(getattr(genre, "value", genre))
        super().__init__("UNSUPPORTED_GENRE", "PRICING", f"unknown type: {self.genre}")


class InvalidAudienceError(TheaterError, ValueError):
    def __init__(self, audience: Any):
        self.audience = audience
        super().__init__("INVALID_AUDIENCE", "INPUT", f"audience must be a non-negative integer, got {audience!r}")


class InvoiceFormatError(TheaterError, ValueError):
    def __init__(self, explanation: str):
        super().__init__("INVOICE_FORMAT", "INPUT", explanation)


class ConfigurationError(TheaterError):
    def __init__(self, explanation: str):
        super().__init__("CONFIGURATION", "CONFIG", explanation)
