from __future__ import annotations

import base64
import time
import uuid


def timestamp_ms() -> int:
    """Return milliseconds since the unix epoch."""
    return int(time.time() * 1000)


def new_guid() -> str:
    """Create a random hyphenated UUID string."""
    return str(uuid.uuid4())


def to_utf8_bytes(text: str) -> bytes:
    return text.encode("utf-8")


def utf8_length(text: str) -> int:
    """Return the byte length of text encoded as UTF-8."""
    return len(to_utf8_bytes(text))


def base64_encode(text: str) -> str:
    """Base64 encode the UTF-8 bytes of text."""
    return base64.b64encode(to_utf8_bytes(text)).decode("ascii")


def check_argument(condition: bool, message: str) -> None:
    """Raise ValueError carrying message when condition is false."""
    if not condition:
        raise ValueError(message)


def is_time_in_range(start_time: int, check_time: int, range_ms: int) -> bool:
    """True when start_time falls after check_time - range_ms."""
    return start_time > check_time - range_ms
