"""
Ownership proof service: the public boundary of Wallet Proof.

verify_wallet_signature(address, message, signature_base64) proves that the
caller holds the key behind a base-58 wallet address.
validate_message_timestamp(message) enforces the 5-minute freshness window.

The two checks are independent and callers run both before authorizing: some
callers verify the signature before knowing whether the message is theirs (e.g.
to log attempted replays). Both entry points fail closed and never raise; every
failure is a plain False so error differences cannot be used as an oracle.

Message convention for clients building signable text:

    <anything the caller wants, e.g. action, nonce>
    Timestamp: <unix_ms>
"""

from __future__ import annotations

import base64
import binascii

from wallet_proof.codec.base58 import MAX_PUBLIC_KEY_CHARS, b58decode
from wallet_proof.core.exceptions import InvalidEncoding
from wallet_proof.crypto.ed25519 import check_signature
from wallet_proof.proof.result import ProofCheck, ProofFailureReason
from wallet_proof.proof_logging import bind_wallet, get_logger
from wallet_proof.replay.guard import DEFAULT_MAX_AGE_MS, check_freshness

logger = get_logger(__name__)

MESSAGE_MAX_AGE_MS = DEFAULT_MAX_AGE_MS


def _decode_signature(signature_base64: str) -> bytes:
    """Strict standard base-64 (padded). Raises ValueError on anything else."""
    if not isinstance(signature_base64, str):
        raise ValueError("signature must be base64 text")
    return base64.b64decode(signature_base64.encode("ascii"), validate=True)


def check_ownership(address: str, message: str, signature_base64: str) -> ProofCheck:
    """
    Verify an ownership proof and keep the failure reason.

    Internal: callers outside this package use verify_wallet_signature().
    """
    if not isinstance(address, str) or not isinstance(message, str):
        return ProofCheck.failed(ProofFailureReason.VERIFICATION_MISMATCH)

    address = address.strip()
    if len(address) > MAX_PUBLIC_KEY_CHARS:
        return ProofCheck.failed(ProofFailureReason.KEY_IMPORT_FAILURE)
    try:
        public_key = b58decode(address)
    except InvalidEncoding:
        return ProofCheck.failed(ProofFailureReason.INVALID_ENCODING)

    try:
        signature = _decode_signature(signature_base64)
    except (ValueError, binascii.Error):
        return ProofCheck.failed(ProofFailureReason.INVALID_SIGNATURE_ENCODING)

    try:
        message_bytes = message.encode("utf-8")
    except UnicodeEncodeError:
        return ProofCheck.failed(ProofFailureReason.VERIFICATION_MISMATCH)

    return check_signature(public_key, message_bytes, signature)


def verify_ownership(address: str, message: str, signature_base64: str) -> bool:
    """
    Return True iff signature_base64 is a valid Ed25519 signature of message by address.

    Does not check freshness; pair with validate_message_timestamp().
    """
    try:
        result = check_ownership(address, message, signature_base64)
    except Exception as e:
        logger.debug("ownership_proof_internal_error", error_type=type(e).__name__)
        return False
    if not result.ok:
        wallet = address if isinstance(address, str) else ""
        bind_wallet(wallet).info("ownership_proof_rejected", reason=result.reason.value)
        return False
    bind_wallet(address).debug("ownership_proof_verified")
    return True


# Name used by authorization code
verify_wallet_signature = verify_ownership


def validate_message_timestamp(message: str) -> bool:
    """True iff message carries a "Timestamp: <unix_ms>" within MESSAGE_MAX_AGE_MS of now."""
    result = check_freshness(message, max_age_ms=MESSAGE_MAX_AGE_MS)
    if not result.ok:
        logger.info("message_timestamp_rejected", reason=result.reason.value)
    return result.ok
