"""
Key-value store backed by a single JSON file.

Values are bytes; the file holds them Base64-encoded under their keys.
"""
from __future__ import annotations

import base64
import binascii
import json
from pathlib import Path

from .errors import ReadFailure, StoreUnavailable, WriteFailure
from .store_client import WriteAck


class JsonFileKeyValueStore:
    """A key-value store backed by a JSON file."""

    def __init__(self, file_path: Path | str, signer: str | None = None) -> None:
        """Initialize the store with a file path."""
        self.file_path = Path(file_path)
        self.signer = signer
        self._ensure_file_exists()

    def _ensure_file_exists(self) -> None:
        """Create the JSON file with empty object if it doesn't exist."""
        if not self.file_path.exists():
            try:
                self.file_path.parent.mkdir(parents=True, exist_ok=True)
                self._write_data({})
            except OSError:
                pass  # surfaces on the next read or write

    def _read_data(self) -> dict:
        """Read and return the JSON data from file."""
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StoreUnavailable(f"Cannot read {self.file_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise StoreUnavailable(f"Store file {self.file_path} is corrupt: {e}") from e
        if not isinstance(data, dict):
            raise StoreUnavailable(f"Store file {self.file_path} is not a JSON object")
        return data

    def _write_data(self, data: dict) -> None:
        """Write data to the JSON file."""
        with open(self.file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def is_available(self) -> bool:
        """Check the file can be read as a store."""
        try:
            self._read_data()
        except StoreUnavailable:
            return False
        return True

    def get(self, key: str) -> bytes:
        """Get the bytes stored under key, or b"" if absent."""
        encoded = self._read_data().get(key)
        if encoded is None:
            return b""
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, TypeError) as e:
            raise ReadFailure(key, str(e)) from e

    def set(self, key: str, value: bytes) -> WriteAck:
        """Store bytes under key."""
        if not self.signer:
            raise WriteFailure(key, "no signer identity")
        if not isinstance(value, (bytes, bytearray)):
            raise WriteFailure(key, f"value must be bytes, got {type(value).__name__}")
        data = self._read_data()
        data[key] = base64.b64encode(bytes(value)).decode("ascii")
        try:
            self._write_data(data)
        except OSError as e:
            raise WriteFailure(key, str(e)) from e
        return WriteAck(key=key, signer=self.signer, size=len(value))

    def connect(self, signer: str) -> JsonFileKeyValueStore:
        """Return a client bound to signer over the same file."""
        return JsonFileKeyValueStore(self.file_path, signer=signer)

    def keys(self) -> list[str]:
        """Return all keys."""
        return list(self._read_data().keys())
