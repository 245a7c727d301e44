"""Lifecycle states of a simulation record."""

from enum import StrEnum


class SimulationStatus(StrEnum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
