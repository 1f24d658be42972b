"""Small helpers for IDs, timestamps and simulated transaction hashes."""

from __future__ import annotations

import secrets
import time
from datetime import datetime, timezone
from uuid import uuid4


def now_utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex}"


def new_tx_hash() -> str:
    """Simulated transaction hash: millisecond clock in hex followed by random bytes.

    Practically unique, not cryptographically guaranteed; the ledger rejects
    the rare duplicate and asks for another one.
    """

    millis = time.time_ns() // 1_000_000
    return f"0x{millis:x}{secrets.token_hex(8)}"
