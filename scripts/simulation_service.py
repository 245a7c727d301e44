"""
ResilientCity - Simulation Service
The operations a presentation layer calls: list, run and health check.
"""
from kv_store import KeyValueStore
from log import sim_log
from simulations import (
    RegistryManager,
    SimulationRequest,
    SimulationSummary,
    WalletSession,
    summarize,
)


class SimulationService:
    """Binds a read-only store client and a wallet session to the registry."""

    def __init__(self, store: KeyValueStore, wallet: WalletSession | None = None) -> None:
        self.store = store
        self.wallet = wallet or WalletSession()
        self.registry = RegistryManager(store)

    def check_availability(self) -> bool:
        """Health probe of the store."""
        available = self.store.is_available()
        sim_log(f"Store is {'available' if available else 'not available'}")
        return available

    def list_simulations(self) -> SimulationSummary:
        """Load every simulation and summarize it. Nothing is cached."""
        return summarize(self.registry.list_all())

    def run_simulation(
        self,
        disaster_type: str,
        location: str,
        severity: int,
        parameters: str = "",
    ) -> str:
        """Validate the form and register a new pending simulation.

        Returns:
            The member key of the new simulation.

        Raises:
            WalletNotConnected: If no account can sign the writes.
            SimulationValidationError: If the form is invalid; nothing is
                written.
            StoreError: If any store write fails.
        """
        account = self.wallet.require_account()
        request = SimulationRequest.parse(
            disaster_type=disaster_type,
            location=location,
            severity=severity,
            parameters=parameters,
        )
        signer_registry = RegistryManager(self.store.connect(account))
        member_key = signer_registry.append(request.to_record())
        sim_log(f"Simulation {member_key} registered by {account}")
        return member_key
