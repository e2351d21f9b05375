from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from tracekit.serialization import deserialize_payload, serialize_payload
from tracekit.types import Payload

logger = logging.getLogger(__name__)


def write_payload_to_file(
    path: str | os.PathLike[str],
    payload: Mapping[str, Any],
    *,
    create_parents: bool = True,
    log: logging.Logger | None = None,
) -> bool:
    """Serialize payload and write it to path, returning whether it was written."""
    blob = serialize_payload(payload, log=log)
    if blob is None:
        return False

    target = Path(path)
    try:
        if create_parents:
            target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("wb") as handle:
            handle.write(blob)
    except (OSError, ValueError) as exc:
        (log or logger).error("Error writing dictionary to file %s: %s", target, exc)
        return False
    return True


def read_payload_from_file(
    path: str | os.PathLike[str],
    *,
    log: logging.Logger | None = None,
) -> Payload | None:
    """Read a payload blob from path, or None when it is missing or unreadable."""
    target = Path(path)
    try:
        with target.open("rb") as handle:
            blob = handle.read()
    except (OSError, ValueError) as exc:
        (log or logger).error("Error reading dictionary from file %s: %s", target, exc)
        return None
    return deserialize_payload(blob, log=log)
