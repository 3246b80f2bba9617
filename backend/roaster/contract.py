"""Client for the on-chain roast program.

Instruction layout (little-endian):
    SubmitRoast   u32 code | u8 president_id | u32 len | content bytes
    VoteOnRoast   u32 code | u8 is_upvote | u8 weight
    ClaimRewards  u32 code

The server never holds the user's keys, so instructions are built and then
reported as simulated signatures. With placeholder addresses nothing is
built at all.
"""

import logging
import os
import struct
import time
from enum import IntEnum

from solders.instruction import AccountMeta, Instruction
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID

from backend.roaster.errors import ValidationError
from backend.roaster.wallet import WalletSession

logger = logging.getLogger(__name__)

PROGRAM_ID = os.environ.get("ROAST_PROGRAM_ID", "RoastProgramIDXXXXXXXXXXXXXXXXXXXXXXXXXXXXX")
TOKEN_MINT_ADDRESS = os.environ.get("ROAST_TOKEN_MINT", "RoastTokenMintXXXXXXXXXXXXXXXXXXXXXXXXXXXX")
TREASURY_ADDRESS = os.environ.get("TREASURY_ADDRESS", "RoastTreasuryXXXXXXXXXXXXXXXXXXXXXXXXXXXXXXX")

FALLBACK_PROGRAM_ID = "11111111111111111111111111111111"
FALLBACK_TOKEN_MINT = "So11111111111111111111111111111111111111112"
FALLBACK_TREASURY = "11111111111111111111111111111111"

TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
ASSOCIATED_TOKEN_PROGRAM_ID = Pubkey.from_string("ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL")

MAX_CONTENT_BYTES = 1000 - 9
PLACEHOLDER_MARKER = "XXXXXXXX"
VOTE_WEIGHT = 1


class RoastInstruction(IntEnum):
    SUBMIT_ROAST = 0
    VOTE_ON_ROAST = 1
    CLAIM_REWARDS = 2
    UPDATE_CONFIG = 3


def encode_submit_roast(president_id: int, content: str) -> bytes:
    body = content.encode("utf-8")
    if not 0 <= president_id <= 255:
        raise ValidationError("president_id must fit in one byte")
    if len(body) > MAX_CONTENT_BYTES:
        raise ValidationError(f"Roast content exceeds {MAX_CONTENT_BYTES} bytes")
    return struct.pack("<IBI", RoastInstruction.SUBMIT_ROAST, president_id, len(body)) + body


def encode_vote(is_upvote: bool, weight: int = VOTE_WEIGHT) -> bytes:
    return struct.pack("<IBB", RoastInstruction.VOTE_ON_ROAST, 1 if is_upvote else 0, weight)


def encode_claim_rewards() -> bytes:
    return struct.pack("<I", RoastInstruction.CLAIM_REWARDS)


def associated_token_address(owner: Pubkey, mint: Pubkey) -> Pubkey:
    seeds = [bytes(owner), bytes(TOKEN_PROGRAM_ID), bytes(mint)]
    return Pubkey.find_program_address(seeds, ASSOCIATED_TOKEN_PROGRAM_ID)[0]


def _signature(prefix: str) -> str:
    return f"{prefix}{int(time.time() * 1000)}"


class RoastContract:
    def __init__(self, program_id: str = PROGRAM_ID, token_mint: str = TOKEN_MINT_ADDRESS,
                 treasury: str = TREASURY_ADDRESS):
        self.is_placeholder = False
        self.program_id = self._parse(program_id, FALLBACK_PROGRAM_ID, "program ID")
        self.token_mint = self._parse(token_mint, FALLBACK_TOKEN_MINT, "token mint")
        self.treasury = self._parse(treasury, FALLBACK_TREASURY, "treasury")

    def _parse(self, address: str, fallback: str, label: str) -> Pubkey:
        try:
            if PLACEHOLDER_MARKER in address:
                raise ValueError(f"placeholder {label}")
            return Pubkey.from_string(address)
        except ValueError:
            logger.warning(f"Using fallback {label} for development: {fallback}")
            self.is_placeholder = True
            return Pubkey.from_string(fallback)

    def submit_roast(self, session: WalletSession, president_id: int, content: str) -> str:
        owner = Pubkey.from_string(session.require_address())
        data = encode_submit_roast(president_id, content)
        if self.is_placeholder:
            logger.info(f"Simulating roast submission with development keys: {content[:20]}...")
            return _signature("simulated_dev_")

        roast_account = Keypair().pubkey()
        ix = Instruction(self.program_id, data, [
            AccountMeta(owner, True, True),
            AccountMeta(roast_account, False, True),
            AccountMeta(self.treasury, False, True),
            AccountMeta(SYSTEM_PROGRAM_ID, False, False),
        ])
        logger.info(f"Roast submission would include {len(ix.data)} bytes for account {roast_account}")
        return _signature("simulated_")

    def vote_on_roast(self, session: WalletSession, roast_account_id: str, is_upvote: bool) -> str:
        owner = Pubkey.from_string(session.require_address())
        try:
            roast_account = Pubkey.from_string(roast_account_id)
        except ValueError:
            raise ValidationError("Invalid roast account id")
        data = encode_vote(is_upvote)
        vote_type = "upvote" if is_upvote else "downvote"
        if self.is_placeholder:
            logger.info(f"Simulating {vote_type} with development keys on {roast_account_id[:10]}...")
            return _signature("simulated_dev_vote_")

        ix = Instruction(self.program_id, data, [
            AccountMeta(owner, True, True),
            AccountMeta(roast_account, False, True),
            AccountMeta(associated_token_address(owner, self.token_mint), False, False),
            AccountMeta(TOKEN_PROGRAM_ID, False, False),
        ])
        logger.info(f"Vote transaction would include a {vote_type} ({len(ix.accounts)} accounts)")
        return _signature("simulated_vote_")

    def claim_rewards(self, session: WalletSession) -> str:
        owner = Pubkey.from_string(session.require_address())
        data = encode_claim_rewards()
        if self.is_placeholder:
            logger.info("Simulating claim rewards with development keys")
            return _signature("simulated_dev_claim_")

        ix = Instruction(self.program_id, data, [
            AccountMeta(owner, True, True),
            AccountMeta(associated_token_address(owner, self.token_mint), False, True),
            AccountMeta(self.token_mint, False, False),
            AccountMeta(self.treasury, False, True),
            AccountMeta(TOKEN_PROGRAM_ID, False, False),
        ])
        logger.info(f"Claim rewards transaction would include {len(ix.accounts)} accounts")
        return _signature("simulated_claim_")

    def status(self) -> dict:
        return {
            "programId": str(self.program_id),
            "tokenMint": str(self.token_mint),
            "treasury": str(self.treasury),
            "isPlaceholder": self.is_placeholder,
        }
