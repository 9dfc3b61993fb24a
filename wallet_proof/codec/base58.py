"""
Base-58 decoding (Bitcoin/Solana alphabet).

Wallet addresses are the base-58 rendering of a 32-byte Ed25519 public key.
Decoding treats the text as a big-endian base-58 numeral, accumulates it into a
little-endian byte buffer, then reverses. Leading '1' characters are leading
zero bytes and are restored one for one.
"""

from __future__ import annotations

from wallet_proof.core.exceptions import InvalidCharacter

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

_INDEX: dict[str, int] = {ch: i for i, ch in enumerate(BASE58_ALPHABET)}

# Longest base-58 renderings of a 32-byte key and a 64-byte signature.
# Decoding is quadratic in input length, so callers cap untrusted text first.
MAX_PUBLIC_KEY_CHARS = 44
MAX_SIGNATURE_CHARS = 88


def b58decode(encoded: str) -> bytes:
    """
    Decode base-58 text to raw bytes.

    Empty input decodes to b"". Raises InvalidCharacter (an InvalidEncoding)
    on the first character outside the alphabet; nothing is returned in that case.
    """
    # little-endian base-256 digits of the running value
    acc = bytearray()
    for position, char in enumerate(encoded):
        carry = _INDEX.get(char)
        if carry is None:
            raise InvalidCharacter(char, position)
        for i in range(len(acc)):
            carry += acc[i] * 58
            acc[i] = carry & 0xFF
            carry >>= 8
        while carry > 0:
            acc.append(carry & 0xFF)
            carry >>= 8

    zeros = 0
    for char in encoded:
        if char != "1":
            break
        zeros += 1

    acc.reverse()
    return bytes(zeros) + bytes(acc)
