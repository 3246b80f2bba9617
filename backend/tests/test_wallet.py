"""Tests for the wallet session."""
import asyncio

import pytest

from backend.roaster.errors import WalletRejected, WalletUnavailable
from backend.roaster.wallet import (
    PHANTOM_INSTALL_URL,
    AddressWallet,
    WalletSession,
    is_valid_address,
    session_for_address,
    wallet_status,
)

WALLET = "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU"
OTHER = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"


class FakeProvider:
    def __init__(self, public_key=WALLET, error=None, delay=0):
        self.public_key = public_key
        self.error = error
        self.delay = delay
        self.handlers = {}
        self.signed = []

    async def connect(self):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return {"publicKey": self.public_key}

    async def disconnect(self):
        self.emit("disconnect", None)

    def on(self, event, handler):
        self.handlers.setdefault(event, []).append(handler)

    async def sign_transaction(self, transaction):
        self.signed.append(transaction)
        return f"signed:{transaction}"

    async def sign_all_transactions(self, transactions):
        return [f"signed:{t}" for t in transactions]

    def emit(self, event, payload):
        for handler in self.handlers.get(event, []):
            handler(payload)


def test_is_valid_address():
    assert is_valid_address(WALLET)
    assert not is_valid_address("0OIl-not-base58")
    assert not is_valid_address("")
    assert not is_valid_address(None)


@pytest.mark.asyncio
async def test_connect_without_provider_offers_install_link():
    session = WalletSession(None)
    with pytest.raises(WalletUnavailable) as exc:
        await session.connect()
    assert exc.value.install_url == PHANTOM_INSTALL_URL
    assert not session.is_connected


@pytest.mark.asyncio
async def test_connect_success_notifies_listeners():
    seen = []
    session = WalletSession(FakeProvider())
    session.on("connect", seen.append)
    assert await session.connect() == WALLET
    assert session.is_connected
    assert seen == [WALLET]


@pytest.mark.asyncio
async def test_connect_rejected_by_user():
    session = WalletSession(FakeProvider(error=RuntimeError("User rejected the request")))
    with pytest.raises(WalletRejected, match="User rejected"):
        await session.connect()
    assert not session.is_connected


@pytest.mark.asyncio
async def test_connect_times_out():
    session = WalletSession(FakeProvider(delay=1), timeout=0.01)
    with pytest.raises(WalletRejected, match="did not respond"):
        await session.connect()


@pytest.mark.asyncio
async def test_connect_invalid_address():
    session = WalletSession(FakeProvider(public_key="nope"))
    with pytest.raises(WalletRejected, match="invalid address"):
        await session.connect()


@pytest.mark.asyncio
async def test_account_changed_and_disconnect_events():
    provider = FakeProvider()
    session = WalletSession(provider)
    changes = []
    session.on("accountChanged", changes.append)
    session.on("disconnect", changes.append)
    await session.connect()

    provider.emit("accountChanged", OTHER)
    assert session.address == OTHER
    provider.emit("accountChanged", None)
    assert not session.is_connected
    await session.connect()
    await session.disconnect()
    assert not session.is_connected
    assert changes == [OTHER, None, None]


def test_unknown_event_rejected():
    with pytest.raises(ValueError):
        WalletSession(None).on("explode", print)


@pytest.mark.asyncio
async def test_sign_requires_connection():
    provider = FakeProvider()
    session = WalletSession(provider)
    with pytest.raises(WalletRejected, match="not connected"):
        await session.sign_transaction("tx1")
    await session.connect()
    assert await session.sign_transaction("tx1") == "signed:tx1"
    assert await session.sign_all_transactions(["a", "b"]) == ["signed:a", "signed:b"]


@pytest.mark.asyncio
async def test_sign_without_provider_is_unavailable():
    with pytest.raises(WalletUnavailable):
        await WalletSession(None).sign_transaction("tx1")


@pytest.mark.asyncio
async def test_address_wallet_cannot_sign():
    session = WalletSession(AddressWallet(WALLET))
    await session.connect()
    with pytest.raises(WalletRejected, match="browser wallet"):
        await session.sign_transaction("tx1")


@pytest.mark.asyncio
async def test_session_for_address():
    session = await session_for_address(f" {WALLET} ")
    assert session.address == WALLET

    empty = await session_for_address(None)
    assert empty.provider is None
    assert not empty.is_connected

    blank = await session_for_address("   ")
    assert blank.provider is None

    with pytest.raises(WalletRejected):
        await session_for_address("bogus")


def test_wallet_status():
    status = wallet_status()
    assert status["installUrl"] == PHANTOM_INSTALL_URL
    assert status["provider"] == "phantom"
