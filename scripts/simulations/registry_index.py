"""Registry index: the ordered list of member keys kept under one store key.

Encoded form::

    {"version": 4, "keys": ["1700000000000-a1b2c3d", ...]}

A bare JSON list of keys (the format older writers used) is accepted on
decode and reported as version 0.  An empty payload is an empty index.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .errors import DecodeError


@dataclass(frozen=True)
class RegistryIndex:
    """Immutable snapshot of the index at a given version."""

    keys: tuple[str, ...] = ()
    version: int = 0

    def __contains__(self, member_key: str) -> bool:
        return member_key in self.keys

    def __len__(self) -> int:
        return len(self.keys)

    def appended(self, member_key: str) -> RegistryIndex:
        """Return the next version with *member_key* at the end.

        Appending a key that is already present returns ``self`` unchanged.
        """
        if member_key in self.keys:
            return self
        return RegistryIndex(keys=self.keys + (member_key,), version=self.version + 1)


def encode_index(index: RegistryIndex) -> bytes:
    """Serialize an index to UTF-8 JSON bytes."""
    data = {"version": index.version, "keys": list(index.keys)}
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def decode_index(payload: bytes) -> RegistryIndex:
    """Parse index bytes.

    Raises:
        DecodeError: If the payload is neither a key list nor a versioned
            index object.
    """
    if not payload:
        return RegistryIndex()
    try:
        data: Any = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Registry index is not valid JSON: {e}") from e

    if isinstance(data, list):
        version, keys = 0, data
    elif isinstance(data, dict):
        version, keys = data.get("version", 0), data.get("keys")
    else:
        raise DecodeError(f"Registry index has unexpected type {type(data).__name__}")

    if not isinstance(version, int) or isinstance(version, bool) or version < 0:
        raise DecodeError(f"Registry index version is invalid: {version!r}")
    if not isinstance(keys, list) or not all(isinstance(k, str) and k for k in keys):
        raise DecodeError("Registry index keys must be a list of non-empty strings")

    # Drop repeats left by concurrent writers, keeping first position
    return RegistryIndex(keys=tuple(dict.fromkeys(keys)), version=version)
