from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote_plus

from tracekit.types import Payload

logger = logging.getLogger(__name__)


def dict_to_json(
    payload: Mapping[str, Any],
    *,
    ensure_ascii: bool = False,
    log: logging.Logger | None = None,
) -> str | None:
    """Encode a payload as compact JSON text, or None when it cannot be encoded."""
    try:
        return json.dumps(dict(payload), separators=(",", ":"), ensure_ascii=ensure_ascii, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        (log or logger).error("Error serializing dictionary to JSON string: %s", exc)
        return None


def json_to_dict(text: str, *, log: logging.Logger | None = None) -> Payload | None:
    """Decode JSON text into a payload, or None when it is not a JSON object."""
    try:
        result = json.loads(text)
    except (TypeError, ValueError, RecursionError) as exc:
        (log or logger).error("Error deserializing JSON string to dictionary: %s", exc)
        return None

    if not isinstance(result, dict):
        (log or logger).error(
            "Error deserializing JSON string to dictionary: expected object, got %s",
            type(result).__name__,
        )
        return None
    return result


def _encode_query_value(key: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"query string value for {key!r} must be str, got {type(value).__name__}")
    return quote_plus(value)


def to_query_string(payload: Mapping[str, Any]) -> str:
    """Convert an event payload to a querystring of the form "?e=pv&tna=cf"."""
    pairs = [
        f"{quote_plus(str(key))}={_encode_query_value(key, value)}"
        for key, value in payload.items()
    ]
    return "?" + "&".join(pairs)
