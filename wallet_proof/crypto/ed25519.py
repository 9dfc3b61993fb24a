"""
Ed25519 detached-signature verification (RFC 8032) via PyNaCl.

Marshals raw public key, message and signature bytes into libsodium and reports
pass/fail. Malformed key, malformed signature and a genuine mismatch all count
as failure; primitive exceptions never propagate.
"""

from __future__ import annotations

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from wallet_proof.proof.result import ProofCheck, ProofFailureReason
from wallet_proof.proof_logging import get_logger

logger = get_logger(__name__)

PUBLIC_KEY_BYTES = 32
SIGNATURE_BYTES = 64


def check_signature(raw_public_key: bytes, message: bytes, signature: bytes) -> ProofCheck:
    """
    Verify signature over message with raw_public_key, keeping the failure reason.

    Each buffer is copied into an owned bytes object before reaching the primitive.
    """
    try:
        public_key = bytes(raw_public_key)
        message_bytes = bytes(message)
        signature_bytes = bytes(signature)
    except TypeError:
        return ProofCheck.failed(ProofFailureReason.VERIFICATION_MISMATCH)

    if len(public_key) != PUBLIC_KEY_BYTES:
        return ProofCheck.failed(ProofFailureReason.KEY_IMPORT_FAILURE)
    try:
        verify_key = VerifyKey(public_key)
    except (ValueError, TypeError):
        return ProofCheck.failed(ProofFailureReason.KEY_IMPORT_FAILURE)

    if len(signature_bytes) != SIGNATURE_BYTES:
        return ProofCheck.failed(ProofFailureReason.VERIFICATION_MISMATCH)

    try:
        verify_key.verify(message_bytes, signature_bytes)
    except BadSignatureError:
        return ProofCheck.failed(ProofFailureReason.VERIFICATION_MISMATCH)
    except Exception as e:
        logger.debug("ed25519_primitive_error", error_type=type(e).__name__)
        return ProofCheck.failed(ProofFailureReason.VERIFICATION_MISMATCH)
    return ProofCheck.passed()


def verify(raw_public_key: bytes, message: bytes, signature: bytes) -> bool:
    """Return True only if signature is a valid Ed25519 signature of message under raw_public_key."""
    return check_signature(raw_public_key, message, signature).ok
