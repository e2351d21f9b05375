from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from tracekit import payload as payload_codec
from tracekit import serialization, storage, utils
from tracekit.config import TrackerSettings
from tracekit.types import Payload


class TrackerUtils:
    """Tracker helpers bound to one logger and one set of settings.

    Every failure message from the sentinel-returning helpers goes to the
    logger given here instead of the module loggers.
    """

    def __init__(
        self,
        settings: TrackerSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings = settings if settings is not None else TrackerSettings()
        self.logger = logger if logger is not None else logging.getLogger(self.settings.logger_name)

    def timestamp_ms(self) -> int:
        return utils.timestamp_ms()

    def new_guid(self) -> str:
        return utils.new_guid()

    def dict_to_json(self, payload: Mapping[str, Any]) -> str | None:
        return payload_codec.dict_to_json(
            payload,
            ensure_ascii=self.settings.json_ensure_ascii,
            log=self.logger,
        )

    def json_to_dict(self, text: str) -> Payload | None:
        return payload_codec.json_to_dict(text, log=self.logger)

    def utf8_length(self, text: str) -> int:
        return utils.utf8_length(text)

    def base64_encode(self, text: str) -> str:
        return utils.base64_encode(text)

    def to_query_string(self, payload: Mapping[str, Any]) -> str:
        return payload_codec.to_query_string(payload)

    def to_utf8_bytes(self, text: str) -> bytes:
        return utils.to_utf8_bytes(text)

    def serialize_payload(self, payload: Mapping[str, Any]) -> bytes | None:
        return serialization.serialize_payload(payload, log=self.logger)

    def deserialize_payload(self, blob: bytes) -> Payload | None:
        return serialization.deserialize_payload(blob, log=self.logger)

    def check_argument(self, condition: bool, message: str) -> None:
        utils.check_argument(condition, message)

    def write_payload_to_file(self, path: str | os.PathLike[str], payload: Mapping[str, Any]) -> bool:
        return storage.write_payload_to_file(
            path,
            payload,
            create_parents=self.settings.create_parent_dirs,
            log=self.logger,
        )

    def read_payload_from_file(self, path: str | os.PathLike[str]) -> Payload | None:
        return storage.read_payload_from_file(path, log=self.logger)

    def is_time_in_range(self, start_time: int, check_time: int, range_ms: int) -> bool:
        return utils.is_time_in_range(start_time, check_time, range_ms)
