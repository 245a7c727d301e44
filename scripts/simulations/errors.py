"""Domain failures for simulation records and the registry."""


class SimulationError(Exception):
    """Base class for simulation registry errors."""


class DecodeError(SimulationError, ValueError):
    """A stored payload could not be decoded into an index or a record."""


class SimulationValidationError(SimulationError, ValueError):
    """Input for a new simulation is missing or malformed."""


class WalletNotConnected(SimulationError):
    """A write was attempted without a connected wallet account."""
