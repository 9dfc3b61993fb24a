"""
Signature primitives. Ed25519 only.
"""

from wallet_proof.crypto.ed25519 import check_signature, verify

__all__ = ["check_signature", "verify"]
