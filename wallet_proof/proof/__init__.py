"""
Ownership proof service — composes codec, Ed25519 verifier and replay guard.

Import entry points from wallet_proof.proof.service or the package root.
"""
