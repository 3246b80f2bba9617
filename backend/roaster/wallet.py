"""Phantom-style wallet session.

The wallet itself lives in the user's browser. The server sees it through a
provider exposing connect / disconnect / on / sign_transaction /
sign_all_transactions. A missing provider is a normal state: callers get
the install link instead of an error page.
"""

import asyncio
import logging
import os
import re
from typing import Any, Callable, Protocol

from backend.roaster.errors import WalletRejected, WalletUnavailable

logger = logging.getLogger(__name__)

PHANTOM_INSTALL_URL = "https://phantom.app/"
SOLANA_NETWORK = os.environ.get("SOLANA_NETWORK", "devnet")
WALLET_TIMEOUT = float(os.environ.get("WALLET_TIMEOUT", "60"))
WALLET_EVENTS = ("connect", "disconnect", "accountChanged")
WALLET_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")


class WalletProvider(Protocol):
    async def connect(self) -> dict: ...

    async def disconnect(self) -> None: ...

    def on(self, event: str, handler: Callable[[Any], None]) -> None: ...

    async def sign_transaction(self, transaction: Any) -> Any: ...

    async def sign_all_transactions(self, transactions: list) -> list: ...


def is_valid_address(address: str) -> bool:
    return bool(WALLET_RE.match(address or ""))


class AddressWallet:
    """Provider for a wallet the browser already connected and reported by address.

    It can identify the user but cannot sign; signing happens client side.
    """

    def __init__(self, address: str):
        self.address = address.strip()
        self._handlers: dict[str, list[Callable]] = {e: [] for e in WALLET_EVENTS}

    async def connect(self) -> dict:
        self._emit("connect", self.address)
        return {"publicKey": self.address}

    async def disconnect(self) -> None:
        self._emit("disconnect", None)

    def on(self, event: str, handler: Callable[[Any], None]) -> None:
        self._handlers[event].append(handler)

    async def sign_transaction(self, transaction: Any) -> Any:
        raise WalletRejected("Transactions must be signed in the browser wallet")

    async def sign_all_transactions(self, transactions: list) -> list:
        raise WalletRejected("Transactions must be signed in the browser wallet")

    def _emit(self, event: str, payload: Any):
        for handler in self._handlers[event]:
            handler(payload)


class WalletSession:
    """Tracks the connected address of one provider and relays its events."""

    def __init__(self, provider: WalletProvider | None, timeout: float = WALLET_TIMEOUT):
        self.provider = provider
        self.timeout = timeout
        self.address: str | None = None
        self._listeners: dict[str, list[Callable]] = {e: [] for e in WALLET_EVENTS}
        if provider is not None:
            provider.on("accountChanged", self._on_account_changed)
            provider.on("disconnect", self._on_disconnect)

    @property
    def is_connected(self) -> bool:
        return self.address is not None

    def on(self, event: str, handler: Callable[[Any], None]):
        if event not in self._listeners:
            raise ValueError(f"Unknown wallet event {event!r}")
        self._listeners[event].append(handler)

    def _notify(self, event: str, payload: Any):
        for handler in self._listeners[event]:
            handler(payload)

    def _on_account_changed(self, public_key: Any):
        # Phantom sends null when the user switches to an account not yet approved.
        self.address = str(public_key) if public_key else None
        self._notify("accountChanged", self.address)

    def _on_disconnect(self, _payload: Any):
        self.address = None
        self._notify("disconnect", None)

    async def _call(self, coro, action: str):
        try:
            return await asyncio.wait_for(coro, timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise WalletRejected(f"Wallet did not respond to {action}") from e
        except WalletRejected:
            raise
        except Exception as e:
            raise WalletRejected(f"{action} rejected: {e}") from e

    async def connect(self) -> str:
        if self.provider is None:
            raise WalletUnavailable(PHANTOM_INSTALL_URL)
        result = await self._call(self.provider.connect(), "connect")
        address = str((result or {}).get("publicKey") or "")
        if not is_valid_address(address):
            raise WalletRejected(f"Wallet returned an invalid address: {address!r}")
        self.address = address
        logger.info(f"Wallet connected: {address[:8]}...")
        self._notify("connect", address)
        return address

    async def disconnect(self):
        if self.provider is not None and self.address is not None:
            await self._call(self.provider.disconnect(), "disconnect")
        self.address = None

    def require_address(self) -> str:
        if self.provider is None:
            raise WalletUnavailable(PHANTOM_INSTALL_URL)
        if self.address is None:
            raise WalletRejected("Wallet not connected")
        return self.address

    async def sign_transaction(self, transaction: Any) -> Any:
        self.require_address()
        return await self._call(self.provider.sign_transaction(transaction), "signTransaction")

    async def sign_all_transactions(self, transactions: list) -> list:
        self.require_address()
        return await self._call(self.provider.sign_all_transactions(transactions), "signAllTransactions")


async def session_for_address(address: str | None) -> WalletSession:
    """Connected session for an address reported by the browser, or an empty session."""
    address = (address or "").strip()
    if not address:
        return WalletSession(None)
    if not is_valid_address(address):
        raise WalletRejected("Invalid Solana wallet address")
    session = WalletSession(AddressWallet(address))
    await session.connect()
    return session


def wallet_status() -> dict:
    return {
        "provider": "phantom",
        "installUrl": PHANTOM_INSTALL_URL,
        "network": SOLANA_NETWORK,
    }
