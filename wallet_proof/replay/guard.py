"""
Replay guard for signed login messages.

Signed messages carry a "Timestamp: <unix_ms>" line. A proof is fresh when that
timestamp lies within max_age_ms of now in either direction, so stale proofs and
future-dated proofs are both rejected. Only the first marker in the message counts.
"""

from __future__ import annotations

import re
import time

from wallet_proof.proof.result import ProofCheck, ProofFailureReason

DEFAULT_MAX_AGE_MS = 5 * 60 * 1000

# Largest value accepted as a millisecond timestamp (unsigned 64-bit)
MAX_TIMESTAMP_MS = 2**64 - 1

TIMESTAMP_PATTERN = re.compile(r"Timestamp:\s*([0-9]+)")


def now_ms() -> int:
    """Current Unix time in milliseconds."""
    return time.time_ns() // 1_000_000


def extract_timestamp(message: str) -> int | None:
    """Return the first embedded timestamp (ms), or None if absent or out of range."""
    if not isinstance(message, str):
        return None
    match = TIMESTAMP_PATTERN.search(message)
    if match is None:
        return None
    digits = match.group(1).lstrip("0") or "0"
    # int() refuses very long digit strings; anything past 20 digits overflows anyway
    if len(digits) > len(str(MAX_TIMESTAMP_MS)):
        return None
    value = int(digits)
    if value > MAX_TIMESTAMP_MS:
        return None
    return value


def check_freshness(
    message: str,
    now: int | None = None,
    max_age_ms: int = DEFAULT_MAX_AGE_MS,
) -> ProofCheck:
    """Freshness check with reason code. Boundary (|now - ts| == max_age_ms) is accepted."""
    ts = extract_timestamp(message)
    if ts is None:
        return ProofCheck.failed(ProofFailureReason.MISSING_OR_MALFORMED_TIMESTAMP)
    current = now_ms() if now is None else now
    if abs(current - ts) > max_age_ms:
        return ProofCheck.failed(ProofFailureReason.STALE_OR_FUTURE_TIMESTAMP)
    return ProofCheck.passed()


def is_fresh(message: str, now: int | None = None, max_age_ms: int = DEFAULT_MAX_AGE_MS) -> bool:
    """True iff message carries a timestamp within max_age_ms of now (ms)."""
    return check_freshness(message, now, max_age_ms).ok
