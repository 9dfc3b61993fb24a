"""
Wallet Proof — off-chain proof of Solana wallet ownership.

Verifies that a caller controls the Ed25519 key behind a base-58 wallet
address by checking a detached signature over a caller-built message, and
rejects replayed proofs whose embedded timestamp has left the freshness window.
"""

from wallet_proof.proof.service import (
    MESSAGE_MAX_AGE_MS,
    validate_message_timestamp,
    verify_wallet_signature,
)

__version__ = "0.1.0"

__all__ = [
    "MESSAGE_MAX_AGE_MS",
    "validate_message_timestamp",
    "verify_wallet_signature",
]
