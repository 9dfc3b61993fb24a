"""
Replay protection: freshness of the timestamp embedded in signed messages.
"""

from wallet_proof.replay.guard import (
    DEFAULT_MAX_AGE_MS,
    check_freshness,
    extract_timestamp,
    is_fresh,
)

__all__ = ["DEFAULT_MAX_AGE_MS", "check_freshness", "extract_timestamp", "is_fresh"]
