"""
Text codecs for wallet addresses and signatures.
"""

from wallet_proof.codec.base58 import BASE58_ALPHABET, b58decode

__all__ = ["BASE58_ALPHABET", "b58decode"]
