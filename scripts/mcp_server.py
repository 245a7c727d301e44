#!/usr/bin/env python3
"""ResilientCity MCP Server - exposes the simulation registry as tools."""
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from fastmcp import FastMCP

import conf
from config import SIGNER_ENV_VAR
from kv_store import JsonFileKeyValueStore, StoreError
from log import sim_log
from simulation_service import SimulationService
from simulations import SimulationError, WalletSession

mcp = FastMCP("resilient-city")


class EnvSignerProvider:
    """Wallet provider whose only account comes from the environment."""

    def request_accounts(self) -> list[str]:
        signer = os.environ.get(SIGNER_ENV_VAR, "")
        return [signer] if signer else []

    def on_accounts_changed(self, handler) -> None:
        pass  # the environment does not change under a running server


def build_service(store_file: Path | None = None) -> SimulationService:
    """Service over the JSON file store, signing as the env-configured account."""
    wallet = WalletSession()
    wallet.connect(EnvSignerProvider())
    return SimulationService(JsonFileKeyValueStore(store_file or conf.STORE_FILE), wallet)


_service: SimulationService | None = None


def get_service() -> SimulationService:
    global _service
    if _service is None:
        _service = build_service()
    return _service


@mcp.tool()
def check_availability() -> str:
    """Report whether the simulation store can be reached."""
    available = get_service().check_availability()
    return f"Simulation store is {'available' if available else 'not available'}"


@mcp.tool()
def list_simulations() -> dict:
    """List all registered disaster simulations, newest first, with statistics.

    Returns:
        Dict with total_count, counts_by_status, severity_histogram and
        simulations.
    """
    try:
        summary = get_service().list_simulations()
    except StoreError as e:
        sim_log(f"MCP list_simulations failed: {e}")
        return {"error": str(e)}
    return {
        "total_count": summary.total_count,
        "counts_by_status": {str(k): v for k, v in summary.counts_by_status.items()},
        "severity_histogram": list(summary.severity_histogram),
        "simulations": [
            {"id": r.id, **r.model_dump(mode="json", by_alias=True)}
            for r in summary.records_sorted_by_time_desc
        ],
    }


@mcp.tool()
def run_simulation(disaster_type: str, location: str, severity: int, parameters: str = "") -> str:
    """Register a new pending disaster simulation.

    Args:
        disaster_type: Category, e.g. Flood, Earthquake, Wildfire, Hurricane, Pandemic.
        location: City or region.
        severity: 1 (minor) to 5 (catastrophic).
        parameters: Optional simulation parameters as a JSON string.

    Returns:
        The new simulation id, or the reason it was rejected.
    """
    try:
        member_key = get_service().run_simulation(disaster_type, location, severity, parameters)
    except (SimulationError, StoreError) as e:
        sim_log(f"MCP run_simulation failed: {e}")
        return f"Simulation failed: {e}"
    return f"Simulation {member_key} registered"


if __name__ == "__main__":
    mcp.run(transport="stdio")
