from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr, confloat

Payload = dict[str, Any]

# JSON-native scalars only, so a blob decodes to exactly what was encoded.
BlobValue = Union[StrictStr, StrictInt, confloat(strict=True, allow_inf_nan=False), StrictBool, None]


class BlobEnvelope(BaseModel):
    """Versioned body of a serialized payload blob."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    version: int
    payload: dict[str, BlobValue]
