"""Logging setup for Presidential Roast.

Ledger and LLM errors are logged with their exception text, which can echo
back configuration values. Records pass through ``SecretRedactingFilter``
so an Anthropic key or a raw Solana secret key never reaches stdout.
"""

import logging
import os
import re
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | {app} | %(name)s | %(message)s"
NOISY_LOGGERS = ("httpx", "httpcore", "anthropic", "PIL", "uvicorn.access")

ANTHROPIC_KEY_RE = re.compile(r"sk-ant-[A-Za-z0-9_-]+")
# 32+ comma-separated byte values, the SOLANA_PRIVATE_KEY format
BYTE_ARRAY_RE = re.compile(r"\[?\d{1,3}(?:\s*,\s*\d{1,3}){31,}\]?")
REDACTED = "[REDACTED]"


def redact(message: str) -> str:
    message = ANTHROPIC_KEY_RE.sub(REDACTED, message)
    return BYTE_ARRAY_RE.sub(REDACTED, message)


class SecretRedactingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        cleaned = redact(record.getMessage())
        if cleaned != record.getMessage():
            record.msg = cleaned
            record.args = None
        return True


def setup_logging(app_name: str = "presidential-roast", level: str = None):
    """Configure root logging once, at application startup."""
    level = level or os.environ.get("LOG_LEVEL", "INFO")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT.format(app=app_name), datefmt="%Y-%m-%d %H:%M:%S"))
    handler.addFilter(SecretRedactingFilter())
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )
    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)
