"""Disaster simulation registry: record codec, index, manager and statistics."""

from .aggregator import SimulationSummary, summarize
from .errors import DecodeError, SimulationError, SimulationValidationError, WalletNotConnected
from .registry_index import RegistryIndex, decode_index, encode_index
from .registry_manager import RegistryManager, generate_member_key, member_store_key
from .simulation_record import SimulationRecord, decode_record, encode_record
from .simulation_request import SimulationRequest
from .simulation_status import SimulationStatus
from .wallet import WalletProvider, WalletSession
