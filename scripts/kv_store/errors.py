"""Store-level failures."""


class StoreError(Exception):
    """Base class for key-value store failures."""


class StoreUnavailable(StoreError):
    """The store cannot be reached or reports itself unavailable."""


class ReadFailure(StoreError):
    """A single key could not be read."""

    def __init__(self, key: str, reason: str = ""):
        self.key = key
        super().__init__(f"Failed to read {key!r}" + (f": {reason}" if reason else ""))


class WriteFailure(StoreError):
    """The store rejected a ``set``."""

    def __init__(self, key: str, reason: str = ""):
        self.key = key
        super().__init__(f"Failed to write {key!r}" + (f": {reason}" if reason else ""))
