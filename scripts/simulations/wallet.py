"""Wallet connection: which account signs writes."""

from __future__ import annotations

from typing import Callable, Protocol

from log import sim_log

from .errors import WalletNotConnected

AccountsHandler = Callable[[list[str]], None]


class WalletProvider(Protocol):
    def request_accounts(self) -> list[str]: ...

    def on_accounts_changed(self, handler: AccountsHandler) -> None: ...


class WalletSession:
    """Tracks the active account of a connected wallet provider."""

    def __init__(self) -> None:
        self.provider: WalletProvider | None = None
        self._account = ""

    @property
    def account(self) -> str:
        return self._account

    @property
    def connected(self) -> bool:
        return self.provider is not None and bool(self._account)

    def connect(self, provider: WalletProvider) -> str:
        """Request accounts from *provider* and follow its account changes."""
        accounts = provider.request_accounts()
        self.provider = provider
        self._account = accounts[0] if accounts else ""
        provider.on_accounts_changed(self._handle_accounts_changed)
        sim_log(f"Wallet connected: {self._account or '<no account>'}")
        return self._account

    def disconnect(self) -> None:
        self.provider = None
        self._account = ""
        sim_log("Wallet disconnected")

    def require_account(self) -> str:
        if not self.connected:
            raise WalletNotConnected("Please connect wallet first")
        return self._account

    def _handle_accounts_changed(self, accounts: list[str]) -> None:
        # Events from a provider we already dropped are ignored
        if self.provider is None:
            return
        self._account = accounts[0] if accounts else ""
        sim_log(f"Wallet account changed: {self._account or '<no account>'}")
