from __future__ import annotations

import time
import uuid

import pytest

from tracekit.utils import (
    base64_encode,
    check_argument,
    is_time_in_range,
    new_guid,
    timestamp_ms,
    to_utf8_bytes,
    utf8_length,
)


def test_timestamp_ms_is_epoch_milliseconds() -> None:
    before = int(time.time() * 1000)
    value = timestamp_ms()
    after = int(time.time() * 1000)
    assert isinstance(value, int)
    assert before <= value <= after


def test_new_guid_is_unique_uuid_string() -> None:
    first = new_guid()
    second = new_guid()
    assert first != second
    assert len(first) == 36
    assert str(uuid.UUID(first)) == first


@pytest.mark.parametrize("text", ["", "pv", "héllo", "日本語", "emoji 🎉"])
def test_utf8_length_matches_encoded_bytes(text: str) -> None:
    assert utf8_length(text) == len(to_utf8_bytes(text))


def test_to_utf8_bytes_encodes_multibyte_characters() -> None:
    assert to_utf8_bytes("é") == b"\xc3\xa9"
    assert utf8_length("é") == 2


def test_base64_encode_uses_utf8_bytes() -> None:
    assert base64_encode("hello") == "aGVsbG8="
    assert base64_encode("é") == "w6k="
    assert base64_encode("") == ""


def test_check_argument_raises_with_message() -> None:
    with pytest.raises(ValueError, match="msg"):
        check_argument(False, "msg")


def test_check_argument_passes_silently() -> None:
    assert check_argument(True, "msg") is None


def test_is_time_in_range() -> None:
    assert is_time_in_range(100, 150, 40) is False
    assert is_time_in_range(100, 150, 60) is True
    assert is_time_in_range(110, 150, 40) is False
