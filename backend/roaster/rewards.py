"""ROAST token claims and roast NFT mints for a connected wallet."""

import logging
import time

from backend.roaster.contract import RoastContract
from backend.roaster.errors import WalletRejected, WalletUnavailable
from backend.roaster.formatter import reward_tokens
from backend.roaster.wallet import SOLANA_NETWORK, WalletSession

logger = logging.getLogger(__name__)

ROAST_TOKEN_SYMBOL = "ROAST"
PRESIDENT_ID = 1


def _failure(e: Exception) -> dict:
    result = {"success": False, "message": str(e)}
    if isinstance(e, WalletUnavailable):
        result["installUrl"] = e.install_url
    return result


def claim_roast_tokens(session: WalletSession, score: int, contract: RoastContract | None = None) -> dict:
    """Claim the ROAST tokens a score earns."""
    amount = reward_tokens(score)
    contract = contract or RoastContract()
    try:
        signature = contract.claim_rewards(session)
    except (WalletUnavailable, WalletRejected) as e:
        logger.info(f"Token claim refused: {e}")
        return _failure(e)

    logger.info(f"Claimed {amount} {ROAST_TOKEN_SYMBOL} for {session.address[:8]}... ({signature})")
    return {
        "success": True,
        "simulated": True,
        "amount": amount,
        "token": ROAST_TOKEN_SYMBOL,
        "signature": signature,
        "message": f"{amount} {ROAST_TOKEN_SYMBOL} tokens claimed successfully! ({SOLANA_NETWORK})",
    }


def mint_roast_nft(session: WalletSession, roast: str, score: int, contract: RoastContract | None = None) -> dict:
    """Record the roast on the roast program and mint it as a collectible."""
    contract = contract or RoastContract()
    try:
        submission = contract.submit_roast(session, PRESIDENT_ID, roast[:200])
    except (WalletUnavailable, WalletRejected) as e:
        logger.info(f"NFT mint refused: {e}")
        return _failure(e)

    prefix = "mockNFTsig" if SOLANA_NETWORK == "mainnet-beta" else "devnet_NFT_"
    signature = f"{prefix}{int(time.time() * 1000)}"
    logger.info(f"Minted roast NFT for {session.address[:8]}... score={score} ({signature})")
    return {
        "success": True,
        "simulated": True,
        "signature": signature,
        "submission": submission,
        "score": score,
        "message": f"NFT minted successfully! ({SOLANA_NETWORK})",
    }
