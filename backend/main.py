"""Presidential Roast: FastAPI backend."""

import asyncio
import logging
import os
import time
from collections import defaultdict
from pathlib import Path

import httpx
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

# Initialize Sentry
SENTRY_DSN = os.environ.get("SENTRY_DSN", "")
if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[FastApiIntegration(), StarletteIntegration()],
        traces_sample_rate=0.2,
        environment=os.environ.get("ENVIRONMENT", "production"),
    )

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.roaster import ledger
from backend.roaster.card_generator import generate_card
from backend.roaster.contract import RoastContract
from backend.roaster.errors import ValidationError, WalletRejected
from backend.roaster.logging_config import setup_logging
from backend.roaster.models import Category
from backend.roaster.roast_engine import generate_roast, validate_submission
from backend.roaster.rewards import claim_roast_tokens, mint_roast_nft
from backend.roaster.wallet import is_valid_address, session_for_address, wallet_status

logger = logging.getLogger(__name__)

# ── Self-hosted analytics ──
ANALYTICS_URL = os.environ.get("ANALYTICS_URL", "")


async def track_event(event: str, properties: dict = None):
    """Send analytics event to self-hosted store. Never blocks main flow."""
    if not ANALYTICS_URL:
        return
    try:
        async with httpx.AsyncClient() as client:
            await client.post(ANALYTICS_URL, json={
                "app": "presidential-roast",
                "event": event,
                "properties": properties or {},
            }, timeout=5)
    except Exception as e:
        logger.debug(f"Analytics event {event} dropped: {e}")


app = FastAPI(title="Presidential Roast")


@app.on_event("startup")
def startup():
    setup_logging()


# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Config ---
RATE_LIMIT = int(os.environ.get("RATE_LIMIT", "20"))  # roasts per IP per hour
MAX_UPLOAD_BYTES = 1024 * 1024
STATIC_DIR = Path(__file__).parent / "static"

# --- In-memory stores ---
rate_limits: dict[str, list[float]] = defaultdict(list)


# --- Error handlers ---
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(WalletRejected)
async def wallet_rejected_handler(request: Request, exc: WalletRejected):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = ", ".join(str(err["loc"][-1]) for err in exc.errors())
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {fields}"})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


# --- Helpers ---
def _client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _check_rate_limit(ip: str) -> bool:
    now = time.time()
    rate_limits[ip] = [t for t in rate_limits[ip] if now - t < 3600]
    return len(rate_limits[ip]) < RATE_LIMIT


def _record_rate_limit(ip: str):
    rate_limits[ip].append(time.time())


async def _run_roast(category: Category, content: str, ip: str) -> dict:
    if not _check_rate_limit(ip):
        raise HTTPException(status_code=429, detail="Too many roasts! Even I need a break. Try again later.")

    try:
        result = await generate_roast(category, content)
    except Exception as e:
        logger.exception(f"Roast failed for {category.value}: {e}")
        sentry_sdk.capture_exception(e)
        raise HTTPException(status_code=500, detail="Failed to generate roast")

    _record_rate_limit(ip)
    asyncio.create_task(track_event("Roast Generated", {
        "type": category.value,
        "score": result.score,
        "source": result.source,
    }))
    return result.to_response()


# --- Request models ---
class RoastRequest(BaseModel):
    type: str | None = None
    content: str | None = None


class CardRequest(BaseModel):
    roast: str
    score: int
    isExecutiveOrder: bool = False


class SolanaRequest(BaseModel):
    walletAddress: str | None = None
    roast: str | None = None
    score: int | None = None


class ClaimRequest(BaseModel):
    walletAddress: str | None = None
    score: int


class MintRequest(BaseModel):
    walletAddress: str | None = None
    roast: str
    score: int


class VoteRequest(BaseModel):
    walletAddress: str | None = None
    roastAccountId: str
    upvote: bool = True


# --- Routes ---
@app.post("/api/roast")
async def api_roast(req: RoastRequest, request: Request):
    category, content = validate_submission(req.type, req.content)
    return await _run_roast(category, content, _client_ip(request))


@app.post("/api/roast/resume")
async def api_roast_resume(request: Request):
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip() != "text/plain":
        raise ValidationError("Only plain-text (.txt) resumes are supported")
    data = await request.body()
    if len(data) > MAX_UPLOAD_BYTES:
        raise ValidationError("Resume file too large. Keep it under 1 MB.")
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        raise ValidationError("Resume file must be UTF-8 text")

    category, content = validate_submission(Category.RESUME.value, text)
    return await _run_roast(category, content, _client_ip(request))


@app.post("/api/roast/card")
async def api_roast_card(req: CardRequest):
    if not req.roast.strip():
        raise ValidationError("Missing required field: roast")
    score = max(0, min(100, req.score))
    try:
        png = generate_card(req.roast, score, req.isExecutiveOrder)
    except Exception as e:
        logger.exception(f"Card generation failed: {e}")
        sentry_sdk.capture_exception(e)
        raise HTTPException(status_code=500, detail="Card generation failed")
    return Response(content=png, media_type="image/png")


@app.post("/api/solana")
async def api_solana(req: SolanaRequest):
    if not req.walletAddress or not req.roast:
        raise ValidationError("Missing required fields: walletAddress and roast")
    result = await ledger.send_reward(req.walletAddress.strip(), req.roast, req.score)
    asyncio.create_task(track_event("Reward Sent", {"simulated": result["simulated"]}))
    return result


@app.post("/api/claim")
async def api_claim(req: ClaimRequest):
    session = await session_for_address(req.walletAddress)
    return claim_roast_tokens(session, req.score)


@app.post("/api/mint")
async def api_mint(req: MintRequest):
    session = await session_for_address(req.walletAddress)
    return mint_roast_nft(session, req.roast, req.score)


@app.post("/api/vote")
async def api_vote(req: VoteRequest):
    session = await session_for_address(req.walletAddress)
    if not session.is_connected:
        return {"success": False, "message": "Wallet not connected", **wallet_status()}
    signature = RoastContract().vote_on_roast(session, req.roastAccountId, req.upvote)
    return {"success": True, "simulated": True, "signature": signature}


@app.get("/api/balance/{address}")
async def api_balance(address: str):
    if not is_valid_address(address):
        raise ValidationError("Invalid Solana wallet address")
    return await ledger.get_token_balance(address)


@app.get("/api/contract/status")
async def api_contract_status():
    return RoastContract().status()


@app.get("/api/wallet")
async def api_wallet():
    return wallet_status()


@app.get("/robots.txt")
async def robots():
    return Response(content="User-agent: *\nAllow: /\n", media_type="text/plain")


# Mount static files (serves the built frontend when present)
if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/")
    async def index():
        return FileResponse(str(STATIC_DIR / "index.html"))
