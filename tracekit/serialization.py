"""Versioned binary blob codec for payloads.

Blob layout::

    b"TKPL" | version byte | UTF-8 JSON of BlobEnvelope

The body is the JSON form of ``BlobEnvelope`` so entry order and scalar
types (str, int, float, bool, None) survive a round trip.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from tracekit.types import BlobEnvelope, Payload

logger = logging.getLogger(__name__)

BLOB_MAGIC = b"TKPL"
FORMAT_VERSION = 1

_HEADER_SIZE = len(BLOB_MAGIC) + 1


class BlobFormatError(ValueError):
    """Raised when a payload cannot be encoded or a blob cannot be decoded."""


def encode_blob(payload: Mapping[str, Any]) -> bytes:
    """Encode a payload into a blob, raising BlobFormatError on failure."""
    try:
        envelope = BlobEnvelope(version=FORMAT_VERSION, payload=dict(payload))
        body = envelope.model_dump_json().encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise BlobFormatError(f"cannot encode payload: {exc}") from exc
    return BLOB_MAGIC + bytes([FORMAT_VERSION]) + body


def decode_blob(blob: bytes) -> Payload:
    """Decode a blob produced by encode_blob, raising BlobFormatError on failure."""
    if not isinstance(blob, (bytes, bytearray, memoryview)):
        raise BlobFormatError(f"expected bytes, got {type(blob).__name__}")

    data = bytes(blob)
    if len(data) < _HEADER_SIZE or not data.startswith(BLOB_MAGIC):
        raise BlobFormatError("missing blob header")

    version = data[len(BLOB_MAGIC)]
    if not 1 <= version <= FORMAT_VERSION:
        raise BlobFormatError(f"unsupported blob version {version}")

    try:
        envelope = BlobEnvelope.model_validate_json(data[_HEADER_SIZE:])
    except ValidationError as exc:
        raise BlobFormatError(f"malformed blob body: {exc}") from exc

    if envelope.version != version:
        raise BlobFormatError(
            f"blob header version {version} does not match body version {envelope.version}"
        )
    return envelope.payload


def serialize_payload(
    payload: Mapping[str, Any],
    *,
    log: logging.Logger | None = None,
) -> bytes | None:
    """Serialize a payload to a blob, or None when it cannot be encoded."""
    try:
        return encode_blob(payload)
    except BlobFormatError as exc:
        (log or logger).error("Error serializing dictionary: %s", exc)
        return None


def deserialize_payload(blob: bytes, *, log: logging.Logger | None = None) -> Payload | None:
    """Deserialize a blob to a payload, or None when it is malformed or foreign."""
    try:
        return decode_blob(blob)
    except BlobFormatError as exc:
        (log or logger).error("Error de-serializing byte array: %s", exc)
        return None
