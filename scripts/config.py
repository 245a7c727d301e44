"""
Configuration values for the simulation registry.
"""

# Well-known key of the registry index
REGISTRY_KEY = "simulation_keys"

# Store key of a member record is MEMBER_KEY_PREFIX + member key
MEMBER_KEY_PREFIX = "simulation_"

# Random base36 suffix appended to the millisecond timestamp of a member key
MEMBER_KEY_SUFFIX_LENGTH = 7

SEVERITY_LEVELS = 5

# Marker for the opaque payload blob (Base64 of the request form, not encrypted)
PAYLOAD_PREFIX = "FHE-"

# Extra read-modify-write rounds when the index version moves under an append
INDEX_WRITE_RETRIES = 3

# Env var naming the signer used by the tool server
SIGNER_ENV_VAR = "RESILIENT_CITY_SIGNER"
