"""Simulation record model and its byte codec.

Wire format is a compact JSON object using the field names older writers
already put on chain::

    {"data": "...", "disasterType": "Flood", "severity": 3,
     "status": "pending", "timestamp": 1700000000}

The member key is not part of the payload; it is attached as ``id`` after
decoding.
"""

from __future__ import annotations

import json
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import DecodeError
from .simulation_status import SimulationStatus

_REQUIRED_FIELDS = ("data", "timestamp", "disasterType")


class SimulationRecord(BaseModel):
    """One disaster simulation stored under a member key."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    id: str = Field(default="", exclude=True)
    payload: str = Field(alias="data")
    created_at: int = Field(alias="timestamp")
    disaster_type: str = Field(alias="disasterType")
    severity: int = Field(default=0)
    status: SimulationStatus = Field(default=SimulationStatus.PENDING)

    @field_validator("created_at", mode="before")
    @classmethod
    def _floor_fractional_timestamp(cls, value: Any) -> Any:
        if isinstance(value, float) and math.isfinite(value):
            return math.floor(value)
        return value

    def with_id(self, member_key: str) -> SimulationRecord:
        """Return a copy carrying *member_key* as its id."""
        return self.model_copy(update={"id": member_key})


def encode_record(record: SimulationRecord) -> bytes:
    """Serialize a record to deterministic UTF-8 JSON bytes."""
    data = record.model_dump(mode="json", by_alias=True)
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def decode_record(payload: bytes, member_key: str = "") -> SimulationRecord:
    """Parse record bytes.

    ``severity`` falls back to 0 and ``status`` to pending when absent or
    null, so records from older writers still load.

    Raises:
        DecodeError: If the bytes are not a JSON object carrying ``data``,
            ``timestamp`` and ``disasterType`` with valid values.
    """
    try:
        data: Any = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Record {member_key!r} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"Record {member_key!r} is not a JSON object")

    missing = [name for name in _REQUIRED_FIELDS if data.get(name) is None]
    if missing:
        raise DecodeError(f"Record {member_key!r} is missing {', '.join(missing)}")

    # Schema drift: null or empty means "not written"
    for name in ("severity", "status"):
        if name in data and not data[name]:
            del data[name]

    try:
        record = SimulationRecord.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Record {member_key!r} is invalid: {e}") from e
    return record.with_id(member_key)
