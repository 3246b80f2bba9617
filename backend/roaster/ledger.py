"""Solana ledger client for roast rewards.

Real transfers need SOLANA_RPC_URL and SOLANA_PRIVATE_KEY (64 comma-separated
byte values). Every failure along the way degrades to a simulated result
tagged ``"simulated": True``; callers never see a ledger error.
"""

import asyncio
import base64
import logging
import os
import random
import time
from typing import Any

import httpx
from solders.hash import Hash
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.system_program import TransferParams, transfer
from solders.transaction import Transaction

from backend.roaster.contract import TOKEN_MINT_ADDRESS
from backend.roaster.errors import LedgerOperationFailure
from backend.roaster.formatter import HIGH_SCORE_IMAGES, LOW_SCORE_IMAGES

logger = logging.getLogger(__name__)

SOLANA_RPC_URL = os.environ.get("SOLANA_RPC_URL", "")
SOLANA_PRIVATE_KEY = os.environ.get("SOLANA_PRIVATE_KEY", "")
DEFAULT_RPC_URL = "https://api.devnet.solana.com"

LAMPORTS_PER_SOL = 1_000_000_000
TRANSFER_LAMPORTS = 100_000  # 0.0001 SOL
FEE_RESERVE_LAMPORTS = 5000
RPC_TIMEOUT = 15
CONFIRM_ATTEMPTS = 20
CONFIRM_INTERVAL = 0.5

NFT_IMAGES = HIGH_SCORE_IMAGES + LOW_SCORE_IMAGES


def _now_ms() -> int:
    return int(time.time() * 1000)


async def _rpc(client: httpx.AsyncClient, method: str, params: list | None = None, url: str | None = None) -> Any:
    try:
        r = await client.post(
            url or SOLANA_RPC_URL or DEFAULT_RPC_URL,
            json={"jsonrpc": "2.0", "id": 1, "method": method, "params": params or []},
            timeout=RPC_TIMEOUT,
        )
        data = r.json()
    except (httpx.HTTPError, ValueError) as e:
        raise LedgerOperationFailure(f"RPC {method} failed: {e}") from e
    if not isinstance(data, dict):
        raise LedgerOperationFailure(f"RPC {method} returned an unexpected reply: {data!r:.100}")
    if "error" in data:
        raise LedgerOperationFailure(f"RPC error: {data['error']}")
    return data.get("result")


def parse_private_key(raw: str) -> Keypair:
    """Parse a comma-separated 64-byte secret key."""
    if "," not in raw:
        raise LedgerOperationFailure("Invalid private key format")
    try:
        secret = bytes(int(part.strip()) for part in raw.split(","))
    except ValueError as e:
        raise LedgerOperationFailure(f"Private key parsing error: {e}") from e
    if len(secret) != 64:
        raise LedgerOperationFailure("Invalid private key length")
    try:
        return Keypair.from_bytes(secret)
    except Exception as e:
        raise LedgerOperationFailure(f"Failed to create keypair: {e}") from e


def parse_pubkey(address: str) -> Pubkey:
    try:
        return Pubkey.from_string(address)
    except ValueError as e:
        raise LedgerOperationFailure(f"Invalid public key {address!r}") from e


async def get_balance(client: httpx.AsyncClient, pubkey: Pubkey) -> int:
    """Balance in lamports."""
    result = await _rpc(client, "getBalance", [str(pubkey)])
    return (result or {}).get("value", 0)


async def get_latest_blockhash(client: httpx.AsyncClient) -> str:
    result = await _rpc(client, "getLatestBlockhash", [{"commitment": "confirmed"}])
    try:
        return result["value"]["blockhash"]
    except (KeyError, TypeError) as e:
        raise LedgerOperationFailure("Malformed getLatestBlockhash response") from e


async def _wait_for_confirmation(client: httpx.AsyncClient, signature: str):
    for _ in range(CONFIRM_ATTEMPTS):
        result = await _rpc(client, "getSignatureStatuses", [[signature]])
        status = ((result or {}).get("value") or [None])[0]
        if status:
            if status.get("err"):
                raise LedgerOperationFailure(f"Transaction {signature} failed: {status['err']}")
            if status.get("confirmationStatus") in ("confirmed", "finalized"):
                return
        await asyncio.sleep(CONFIRM_INTERVAL)
    raise LedgerOperationFailure(f"Transaction {signature} not confirmed")


async def send_transfer(client: httpx.AsyncClient, payer: Keypair, recipient: Pubkey,
                        lamports: int, blockhash: str) -> str:
    """Sign, send and confirm a SOL transfer. Returns the transaction signature."""
    ix = transfer(TransferParams(from_pubkey=payer.pubkey(), to_pubkey=recipient, lamports=lamports))
    try:
        tx = Transaction.new_signed_with_payer([ix], payer.pubkey(), [payer], Hash.from_string(blockhash))
    except ValueError as e:
        raise LedgerOperationFailure(f"Failed to create transaction: {e}") from e

    encoded = base64.b64encode(bytes(tx)).decode()
    signature = await _rpc(client, "sendTransaction", [encoded, {"encoding": "base64", "preflightCommitment": "confirmed"}])
    if not signature:
        raise LedgerOperationFailure("sendTransaction returned no signature")
    await _wait_for_confirmation(client, signature)
    return signature


def _nft_record(roast: str, score: int | None, tx_id: str, image_url: str) -> dict:
    now = _now_ms()
    return {
        "mint": f"roast{now:x}",
        "txId": tx_id,
        "imageUrl": image_url,
        "metadata": {
            "name": f"Presidential Roast #{str(now)[-6:]}",
            "description": roast[:100] + "...",
            "score": score or 5,
            "image": image_url,
        },
    }


def simulated_reward(wallet_address: str, roast: str, score: int | None, reason: str = "") -> dict:
    """Mock NFT + SOL transfer, clearly tagged as simulated."""
    image_url = random.choice(NFT_IMAGES)
    tx_id = f"tx_{_now_ms():x}_{wallet_address[:8]}"
    logger.info(f"Using simulated Solana reward for {wallet_address[:8]}... ({reason or 'no reason'})")
    return {
        "success": True,
        "simulated": True,
        "reason": reason,
        "message": "Mock NFT minted and SOL tokens transferred successfully",
        "nft": _nft_record(roast, score, tx_id, image_url),
        "tokenTransfer": {
            "tokenMint": "SOL",
            "amount": TRANSFER_LAMPORTS / LAMPORTS_PER_SOL,
            "txId": tx_id,
        },
    }


async def send_reward(wallet_address: str, roast: str, score: int | None) -> dict:
    """Transfer 0.0001 SOL to the roasted wallet and describe its roast NFT."""
    if not SOLANA_RPC_URL or not SOLANA_PRIVATE_KEY:
        return simulated_reward(wallet_address, roast, score, "Missing Solana configuration")

    try:
        async with httpx.AsyncClient(timeout=RPC_TIMEOUT) as client:
            blockhash = await get_latest_blockhash(client)
            payer = parse_private_key(SOLANA_PRIVATE_KEY)
            recipient = parse_pubkey(wallet_address)

            balance = await get_balance(client, payer.pubkey())
            if balance < TRANSFER_LAMPORTS + FEE_RESERVE_LAMPORTS:
                raise LedgerOperationFailure("Insufficient balance in payer account")

            signature = await send_transfer(client, payer, recipient, TRANSFER_LAMPORTS, blockhash)
    except LedgerOperationFailure as e:
        logger.error(f"Solana transfer failed: {e}")
        return simulated_reward(wallet_address, roast, score, str(e))
    except Exception as e:
        logger.exception(f"Unexpected Solana transfer error: {e}")
        return simulated_reward(wallet_address, roast, score, "Unexpected ledger error")

    logger.info(f"Transaction successful with signature: {signature}")
    return {
        "success": True,
        "simulated": False,
        "message": "SOL transferred successfully and NFT minted!",
        "nft": _nft_record(roast, score, signature, random.choice(NFT_IMAGES)),
        "tokenTransfer": {
            "tokenMint": "SOL",
            "amount": TRANSFER_LAMPORTS / LAMPORTS_PER_SOL,
            "txId": signature,
        },
    }


def _simulated_balance(address: str) -> dict:
    return {"address": address, "balance": random.randint(0, 99), "simulated": True}


async def get_token_balance(address: str) -> dict:
    """ROAST token balance for a wallet; a random simulated balance when the RPC fails."""
    try:
        owner = parse_pubkey(address)
        async with httpx.AsyncClient(timeout=RPC_TIMEOUT) as client:
            result = await _rpc(
                client,
                "getTokenAccountsByOwner",
                [str(owner), {"mint": TOKEN_MINT_ADDRESS}, {"encoding": "jsonParsed"}],
            )
        total = 0.0
        for acct in (result or {}).get("value") or []:
            info = acct["account"]["data"]["parsed"]["info"]
            total += info["tokenAmount"].get("uiAmount") or 0
    except LedgerOperationFailure as e:
        logger.warning(f"Token balance lookup failed for {address[:8]}...: {e}")
        return _simulated_balance(address)
    except (KeyError, TypeError, AttributeError) as e:
        logger.warning(f"Malformed token account reply for {address[:8]}...: {e!r}")
        return _simulated_balance(address)

    return {"address": address, "balance": total, "simulated": False}
