"""Pytest fixtures for registry testing."""

import pytest

import conf
from kv_store import InMemoryKeyValueStore
from log import sim_log_clear
from simulations import SimulationRecord, SimulationStatus

SIGNER = "0x00000000000000000000000000000000000000a1"


@pytest.fixture(autouse=True)
def isolated_log(tmp_path, monkeypatch):
    """Send log lines to a per-test file."""
    monkeypatch.setattr(conf, "LOG_FILE", tmp_path / "logs" / "resilient_city.log")
    yield conf.LOG_FILE
    sim_log_clear()


@pytest.fixture
def store():
    """Read-only client over an empty in-memory store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def signer_store(store):
    """Signer-bound client sharing data with ``store``."""
    return store.connect(SIGNER)


@pytest.fixture
def make_record():
    def _make(created_at=1_700_000_000, disaster_type="Flood", severity=3,
              status=SimulationStatus.PENDING, payload="FHE-e30="):
        return SimulationRecord(
            payload=payload,
            created_at=created_at,
            disaster_type=disaster_type,
            severity=severity,
            status=status,
        )
    return _make
