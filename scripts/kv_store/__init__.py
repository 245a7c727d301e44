"""Key-value store clients used as the registry's persistence boundary."""

from .errors import ReadFailure, StoreError, StoreUnavailable, WriteFailure
from .json_file_store import JsonFileKeyValueStore
from .store_client import InMemoryKeyValueStore, KeyValueStore, WriteAck
