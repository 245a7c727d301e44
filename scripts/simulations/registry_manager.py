"""Registry of simulation records on top of a flat key-value store.

The store offers only ``get``/``set`` per key, so the list of records is kept
as a :class:`RegistryIndex` under ``REGISTRY_KEY`` and each record under
``MEMBER_KEY_PREFIX + <member key>``.

Reads fail soft: a corrupt index reads as empty and a corrupt or unreadable
member is skipped, both logged.  Only loss of the store itself propagates.

Writes fail hard: the record is written first, then the index is updated with
a read-modify-write.  A failed record write leaves the index untouched.

Known limitation: the store has no compare-and-swap, so two sessions appending
at the same time can overwrite each other's index update (lost update).
``append`` reads the index back after writing and re-merges its own key when
it was dropped, which narrows the window but cannot close it: a key dropped
after its writer has verified stays unindexed.
"""

from __future__ import annotations

import random
import string
import time

from config import INDEX_WRITE_RETRIES, MEMBER_KEY_PREFIX, MEMBER_KEY_SUFFIX_LENGTH, REGISTRY_KEY
from kv_store import KeyValueStore, ReadFailure, StoreUnavailable, WriteAck, WriteFailure
from log import sim_log

from .errors import DecodeError
from .registry_index import RegistryIndex, decode_index, encode_index
from .simulation_record import SimulationRecord, decode_record, encode_record

_KEY_ALPHABET = string.digits + string.ascii_lowercase
_MAX_KEY_ATTEMPTS = 100


def member_store_key(member_key: str) -> str:
    """Store key under which the record for *member_key* lives."""
    return f"{MEMBER_KEY_PREFIX}{member_key}"


def generate_member_key(now_ms: int | None = None, rng: random.Random | None = None) -> str:
    """Build ``<epoch millis>-<base36 suffix>``."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    chooser = rng or random
    suffix = "".join(chooser.choices(_KEY_ALPHABET, k=MEMBER_KEY_SUFFIX_LENGTH))
    return f"{now_ms}-{suffix}"


class RegistryManager:
    """Lists and appends simulation records through a key-value store."""

    def __init__(
        self,
        store: KeyValueStore,
        index_retries: int = INDEX_WRITE_RETRIES,
        key_factory=generate_member_key,
    ) -> None:
        self.store = store
        self.index_retries = index_retries
        self.key_factory = key_factory

    # -- Index primitives --

    def read_index(self) -> RegistryIndex:
        """Read the index fresh from the store; corrupt payloads read as empty."""
        try:
            return decode_index(self.store.get(REGISTRY_KEY))
        except (ReadFailure, DecodeError) as e:
            sim_log(f"Corrupt registry index treated as empty: {e}")
            return RegistryIndex()

    def write_index(self, index: RegistryIndex) -> WriteAck:
        """Overwrite the stored index."""
        ack = self.store.set(REGISTRY_KEY, encode_index(index))
        sim_log(f"Registry index written: version={index.version} keys={len(index)}")
        return ack

    # -- Read path --

    def list_all(self) -> list[SimulationRecord]:
        """Fetch and decode every indexed record.

        Members that are absent, unreadable or undecodable are skipped.
        Order follows the index; callers sort as they need.

        Raises:
            StoreUnavailable: If the store connection fails.
        """
        if not self.store.is_available():
            sim_log("Store is not available; no simulations to list")
            return []

        index = self.read_index()
        records: list[SimulationRecord] = []
        for member_key in index.keys:
            record = self._load_member(member_key)
            if record is not None:
                records.append(record)
        sim_log(f"Listed {len(records)} of {len(index)} indexed simulations")
        return records

    def _load_member(self, member_key: str) -> SimulationRecord | None:
        try:
            payload = self.store.get(member_store_key(member_key))
        except ReadFailure as e:
            sim_log(f"Skipping simulation {member_key}: {e}")
            return None
        if not payload:
            sim_log(f"Skipping simulation {member_key}: no data stored")
            return None
        try:
            return decode_record(payload, member_key)
        except DecodeError as e:
            sim_log(f"Skipping simulation {member_key}: {e}")
            return None

    # -- Write path --

    def append(self, record: SimulationRecord) -> str:
        """Write *record* under a new member key and add the key to the index.

        Precondition: ``record.disaster_type`` and the location it was built
        from are non-empty; callers validate input (see
        ``SimulationRequest``) before calling.

        Returns:
            The new member key.

        Raises:
            StoreUnavailable: If the store is down; nothing is written.
            WriteFailure: If the record write fails (index untouched), or
                the index write fails (record written but unindexed).
        """
        if not self.store.is_available():
            raise StoreUnavailable("Store is not available; simulation not recorded")

        member_key = self.new_member_key(self.read_index())
        self.store.set(member_store_key(member_key), encode_record(record))
        sim_log(f"Simulation {member_key} written ({record.disaster_type})")

        self._link(member_key)
        return member_key

    def new_member_key(self, index: RegistryIndex) -> str:
        """Generate a member key not present in *index* nor in the store."""
        for _ in range(_MAX_KEY_ATTEMPTS):
            candidate = self.key_factory()
            if candidate in index:
                continue
            if self.store.get(member_store_key(candidate)):
                continue
            return candidate
        raise WriteFailure(REGISTRY_KEY, "could not generate an unused member key")

    def _link(self, member_key: str) -> RegistryIndex:
        # Re-read each round; never reuse an index from an earlier listing
        for attempt in range(self.index_retries + 1):
            base = self.read_index()
            if member_key in base:
                return base
            updated = base.appended(member_key)
            self.write_index(updated)

            confirmed = self.read_index()
            if member_key in confirmed:
                return confirmed
            sim_log(
                f"Index update for {member_key} was overwritten "
                f"(wrote version {updated.version}, found {confirmed.version}); "
                f"attempt {attempt + 1}"
            )
        raise WriteFailure(REGISTRY_KEY, f"{member_key} written but could not be indexed")
