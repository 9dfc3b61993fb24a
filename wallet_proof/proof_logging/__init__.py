"""
Structured logging for Wallet Proof.

JSON logs with timestamp, event_type, wallet and reason codes.
Use get_logger() in every module so verification outcomes stay aggregation-friendly.
"""

from wallet_proof.proof_logging.logger import bind_wallet, get_logger

__all__ = ["bind_wallet", "get_logger"]
