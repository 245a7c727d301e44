"""
ResilientCity - Logging Module
Provides centralized logging functionality for the registry client.
"""
import sys
from datetime import datetime

import conf

# =============================================================================
# CONFIGURATION
# =============================================================================

LOG = True  # Set to False to disable logging
LOG_TO_STDERR = True
first_line = True

# =============================================================================
# LOGGING
# =============================================================================

def sim_log(message: str) -> None:
    """Append log message to the log file if LOG is enabled."""
    global first_line
    if not LOG:
        return
    if first_line:
        first_line = False
        conf.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        sim_log("--- New ResilientCity Session ---")
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    log_line = f"[{timestamp}] {message}\n"
    if LOG_TO_STDERR:
        sys.stderr.write(log_line)
    conf.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    with open(conf.LOG_FILE, "a", encoding="utf-8") as f:
        f.write(log_line)


def sim_log_read() -> str:
    """Return the contents of the log file, or an empty string."""
    if conf.LOG_FILE.exists():
        return conf.LOG_FILE.read_text(encoding="utf-8")
    return ""


def sim_log_print() -> None:
    """Print the contents of the log file to stdout."""
    if conf.LOG_FILE.exists():
        log_contents = sim_log_read()
        if log_contents:
            print(log_contents, end="")
        else:
            print("[ResilientCity Log is empty]")
    else:
        print("[ResilientCity Log file does not exist]")


def sim_log_clear() -> None:
    """Delete the log file."""
    if conf.LOG_FILE.exists():
        conf.LOG_FILE.unlink()
