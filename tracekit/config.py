from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

ENV_PREFIX = "TRACEKIT_"

_TRUE_STRINGS = {"1", "true", "yes", "on", "y"}
_FALSE_STRINGS = {"", "0", "false", "no", "off", "n"}


class TrackerSettings(BaseModel):
    """Settings shared by every helper bound through TrackerUtils."""

    model_config = ConfigDict(extra="forbid")

    logger_name: str = "tracekit"
    log_level: str = "WARNING"
    json_ensure_ascii: bool = False
    create_parent_dirs: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("json_ensure_ascii", "create_parent_dirs", mode="before")
    @classmethod
    def _normalize_flag(cls, value: Any) -> bool:
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _FALSE_STRINGS:
                return False
            if lowered in _TRUE_STRINGS:
                return True
            raise ValueError(f"not a boolean flag: {value}")
        return bool(value)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TrackerSettings:
        """Build settings from TRACEKIT_* environment variables."""
        source = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for field_name in cls.model_fields:
            env_name = ENV_PREFIX + field_name.upper()
            if env_name in source:
                values[field_name] = source[env_name]
        return cls.model_validate(values)
