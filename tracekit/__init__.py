from __future__ import annotations

from tracekit.config import TrackerSettings
from tracekit.facade import TrackerUtils
from tracekit.payload import dict_to_json, json_to_dict, to_query_string
from tracekit.serialization import (
    BlobFormatError,
    decode_blob,
    deserialize_payload,
    encode_blob,
    serialize_payload,
)
from tracekit.storage import read_payload_from_file, write_payload_to_file
from tracekit.types import BlobEnvelope, Payload
from tracekit.utils import (
    base64_encode,
    check_argument,
    is_time_in_range,
    new_guid,
    timestamp_ms,
    to_utf8_bytes,
    utf8_length,
)

__all__ = [
    "BlobEnvelope",
    "BlobFormatError",
    "Payload",
    "TrackerSettings",
    "TrackerUtils",
    "base64_encode",
    "check_argument",
    "decode_blob",
    "deserialize_payload",
    "dict_to_json",
    "encode_blob",
    "is_time_in_range",
    "json_to_dict",
    "new_guid",
    "read_payload_from_file",
    "serialize_payload",
    "timestamp_ms",
    "to_query_string",
    "to_utf8_bytes",
    "utf8_length",
    "write_payload_to_file",
]
