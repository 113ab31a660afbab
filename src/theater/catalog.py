"""Read-only play catalog keyed by play id."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping

from .errors import InvoiceFormatError, UnknownPlayError
from .types import Genre, Play

logger = logging.getLogger(__name__)

__all__ = ["Catalog"]


class Catalog(Mapping[str, Play]):
    """Immutable lookup from play id to :class:`Play`.

    The source mapping is copied at construction time, so later changes to it
    are not observed.
    """

    def __init__(self, plays: Mapping[str, Play]):
        self._plays = MappingProxyType(dict(plays))

    def lookup(self, play_id: str) -> Play:
        try:
            return self._plays[play_id]
        except KeyError:
            raise UnknownPlayError(play_id) from None

    def __getitem__(self, play_id: str) -> Play:
        return self._plays[play_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._plays)

    def __len__(self) -> int:
        return len(self._plays)

    def __repr__(self) -> str:
        return f"Catalog({sorted(self._plays)!r})"

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Catalog":
        """Build a catalog from ``{play_id: {"name": ..., "type": ...}}`` records."""
        if not isinstance(raw, Mapping):
            raise InvoiceFormatError(f"plays must be a JSON object, got {type(raw).__name__}")

        plays: Dict[str, Play] = {}
        for play_id, record in raw.items():
            if not isinstance(record, Mapping):
                raise InvoiceFormatError(f"play '{play_id}' must be an object")
            name = record.get("name")
            genre = record.get("type", record.get("genre"))
            if not isinstance(name, str) or not name.strip():
                raise InvoiceFormatError(f"play '{play_id}' is missing a non-empty string field 'name'")
            if not isinstance(genre, str) or not genre.strip():
                raise InvoiceFormatError(f"play '{play_id}' is missing a non-empty string field 'type'")
            plays[str(play_id)] = Play(name=name, genre=Genre.coerce(genre))

        logger.debug("Loaded catalog with %d plays", len(plays))
        return cls(plays)
