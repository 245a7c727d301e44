"""ResilientCity - Central path configuration."""

import os
from pathlib import Path

USER_HOME = Path.home()
FLOW_HOME = USER_HOME / ".flow"
RESILIENT_HOME = Path(os.environ.get("RESILIENT_CITY_HOME", FLOW_HOME / "resilient_city"))

LOG_FILE = RESILIENT_HOME / "resilient_city.log"
STORE_FILE = RESILIENT_HOME / "kv_store.json"
