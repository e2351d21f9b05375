from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tracekit.config import TrackerSettings
from tracekit.facade import TrackerUtils


def test_facade_round_trips(tmp_path: Path) -> None:
    tracker = TrackerUtils()
    payload = {"e": "pv", "eid": tracker.new_guid(), "dtm": tracker.timestamp_ms()}

    assert tracker.json_to_dict(tracker.dict_to_json(payload)) == payload
    assert tracker.deserialize_payload(tracker.serialize_payload(payload)) == payload

    path = tmp_path / "queue" / "event.bin"
    assert tracker.write_payload_to_file(path, payload) is True
    assert tracker.read_payload_from_file(path) == payload


def test_facade_text_and_range_helpers() -> None:
    tracker = TrackerUtils()
    assert tracker.to_query_string({"e": "pv", "tna": "cf"}) == "?e=pv&tna=cf"
    assert tracker.utf8_length("é") == len(tracker.to_utf8_bytes("é")) == 2
    assert tracker.base64_encode("hello") == "aGVsbG8="
    assert tracker.is_time_in_range(100, 150, 60) is True
    with pytest.raises(ValueError, match="emitter is required"):
        tracker.check_argument(False, "emitter is required")


def test_facade_logs_to_injected_logger(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    injected = logging.getLogger("tests.injected")
    tracker = TrackerUtils(logger=injected)

    with caplog.at_level(logging.ERROR, logger="tests.injected"):
        assert tracker.read_payload_from_file(tmp_path / "missing.bin") is None
        assert tracker.deserialize_payload(b"garbage") is None
        assert tracker.json_to_dict("{") is None

    assert len(caplog.records) == 3
    assert {record.name for record in caplog.records} == {"tests.injected"}


def test_facade_uses_settings_logger_name() -> None:
    tracker = TrackerUtils(TrackerSettings(logger_name="tests.named"))
    assert tracker.logger.name == "tests.named"


def test_facade_applies_settings(tmp_path: Path) -> None:
    tracker = TrackerUtils(TrackerSettings(json_ensure_ascii=True, create_parent_dirs=False))
    assert tracker.dict_to_json({"page": "café"}) == '{"page":"caf\\u00e9"}'
    assert tracker.write_payload_to_file(tmp_path / "missing-dir" / "event.bin", {"e": "pv"}) is False
