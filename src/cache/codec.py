# src/cache/codec.py — v1
"""JSON payload encoding for cached values.

Only the JSON data model survives a round trip: tuples come back as
lists and numeric mapping keys come back as strings.
"""

from __future__ import annotations

import json

from tagcache.cache.errors import DecodingError, EncodingError
from tagcache.cache.models import JsonValue


def encode_value(value: JsonValue) -> str:
    """Serialize a JSON document to payload text.

    Raises:
        EncodingError: If value holds anything outside the JSON data model,
            including NaN and infinities.
    """
    try:
        return json.dumps(
            value,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Value is not JSON-serializable: {e}") from e


def decode_value(payload: str | bytes) -> JsonValue:
    """Parse payload text back into a JSON document.

    Raises:
        DecodingError: If payload is not valid JSON.
    """
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodingError(f"Corrupt cache payload: {e}") from e
