"""Key-value store capability and an in-memory implementation.

A store client is either read-only (no signer) or bound to a signer identity.
Reads never need a signer; every ``set`` does.  Absent keys read back as
``b""``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .errors import StoreUnavailable, WriteFailure


@dataclass(frozen=True)
class WriteAck:
    """Acknowledgement returned by a successful ``set``."""

    key: str
    signer: str
    size: int


@runtime_checkable
class KeyValueStore(Protocol):
    signer: str | None

    def is_available(self) -> bool: ...

    def get(self, key: str) -> bytes: ...

    def set(self, key: str, value: bytes) -> WriteAck: ...

    def connect(self, signer: str) -> KeyValueStore: ...


class _Backing:
    """Shared state behind every client of one in-memory store."""

    def __init__(self) -> None:
        self.data: dict[str, bytes] = {}
        self.available = True


class InMemoryKeyValueStore:
    """Dict-backed store; clients made by ``connect`` share the same data."""

    def __init__(self, signer: str | None = None, _backing: _Backing | None = None) -> None:
        self.signer = signer
        self._backing = _backing or _Backing()

    # -- Capability --

    def is_available(self) -> bool:
        return self._backing.available

    def get(self, key: str) -> bytes:
        self._ensure_available()
        return self._backing.data.get(key, b"")

    def set(self, key: str, value: bytes) -> WriteAck:
        self._ensure_available()
        if not self.signer:
            raise WriteFailure(key, "no signer identity")
        if not isinstance(value, (bytes, bytearray)):
            raise WriteFailure(key, f"value must be bytes, got {type(value).__name__}")
        self._backing.data[key] = bytes(value)
        return WriteAck(key=key, signer=self.signer, size=len(value))

    def connect(self, signer: str) -> InMemoryKeyValueStore:
        """Return a client bound to *signer* over the same data."""
        return InMemoryKeyValueStore(signer=signer, _backing=self._backing)

    # -- Test / admin helpers --

    def set_available(self, available: bool) -> None:
        self._backing.available = available

    def keys(self) -> list[str]:
        return list(self._backing.data.keys())

    def _ensure_available(self) -> None:
        if not self._backing.available:
            raise StoreUnavailable("In-memory store is offline")
