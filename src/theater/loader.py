"""JSON loaders for play catalogs and invoices."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List

from .catalog import Catalog
from .errors import InvalidAudienceError, InvoiceFormatError
from .types import Invoice, Performance

logger = logging.getLogger(__name__)

_PLAY_ID_KEYS = ("playID", "playId", "play_id")


def _read_json(path: str | os.PathLike[str]) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvoiceFormatError(f"Invalid JSON in {path}: {exc}") from exc


def _parse_performance(index: int, raw: Any) -> Performance:
    if not isinstance(raw, dict):
        raise InvoiceFormatError(f"performance #{index} must be an object")

    play_id = next((raw[key] for key in _PLAY_ID_KEYS if key in raw), None)
    if not isinstance(play_id, str) or not play_id:
        raise InvoiceFormatError(f"performance #{index} is missing a string field 'playID'")

    audience = raw.get("audience")
    if isinstance(audience, bool) or not isinstance(audience, int):
        raise InvoiceFormatError(
            f"performance #{index} field 'audience': expected int, got {type(audience).__name__}"
        )
    if audience < 0:
        raise InvalidAudienceError(audience)
    return Performance(play_id=play_id, audience=audience)


def parse_invoice(raw: Any) -> Invoice:
    if not isinstance(raw, dict):
        raise InvoiceFormatError(f"invoice must be a JSON object, got {type(raw).__name__}")

    customer = raw.get("customer")
    if not isinstance(customer, str) or not customer.strip():
        raise InvoiceFormatError("invoice is missing a non-empty string field 'customer'")

    performances = raw.get("performances", [])
    if not isinstance(performances, list):
        raise InvoiceFormatError(
            f"invoice field 'performances': expected list, got {type(performances).__name__}"
        )

    parsed: List[Performance] = [_parse_performance(i, item) for i, item in enumerate(performances)]
    return Invoice.of(customer, parsed)


def parse_plays(raw: Dict[str, Any]) -> Catalog:
    return Catalog.from_dict(raw)


def load_invoice(path: str | os.PathLike[str]) -> Invoice:
    invoice = parse_invoice(_read_json(path))
    logger.debug("Loaded invoice for %s from %s", invoice.customer, path)
    return invoice


def load_plays(path: str | os.PathLike[str]) -> Catalog:
    return parse_plays(_read_json(path))
