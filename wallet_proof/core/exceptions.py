"""
Application-level exceptions.

Raised only by the base-58 codec and the canonical message builder. Every
verification entry point catches them and reports a failed proof instead.
"""

from __future__ import annotations


class WalletProofError(Exception):
    """Base class for Wallet Proof errors."""


class InvalidEncoding(WalletProofError, ValueError):
    """Text is not a valid encoding of the expected alphabet."""


class InvalidCharacter(InvalidEncoding):
    """A character outside the base-58 alphabet was found."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid base58 character {char!r} at position {position}")


class CanonicalPayloadError(WalletProofError, ValueError):
    """Payload cannot be rendered as a v1 canonical message."""
