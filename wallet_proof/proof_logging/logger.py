"""
Structured logging for proof verification events.

Every line carries event_type, level, logger name and an ISO-8601 timestamp,
rendered as JSON (LOG_FORMAT=json, the default) or as colored console output.
Proof material is stripped before rendering: a verification log line may name
the (truncated) wallet and a reason code, never the signed text or signature.

No wallet_proof imports here; every other module imports this one.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

# Event keys that could carry a proof; dropped from every log line
PROOF_MATERIAL_KEYS = frozenset(
    {"message", "message_bytes", "signature", "signature_base64", "signature_base58", "payload"}
)

WALLET_PREFIX_CHARS = 16


def _stamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _event_type(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog's positional 'event' becomes event_type."""
    if "event" in event_dict:
        event_dict.setdefault("event_type", event_dict.pop("event"))
    return event_dict


def redact_proof_material(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Drop signed text and signatures so they never reach a log sink."""
    for key in PROOF_MATERIAL_KEYS.intersection(event_dict):
        del event_dict[key]
    return event_dict


def configure_structlog(level: str = LOG_LEVEL, fmt: str = LOG_FORMAT) -> None:
    """Install the processor chain: context, level, redaction, timestamp, renderer."""
    renderer: Any
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            redact_proof_material,
            structlog.processors.format_exc_info,
            _stamp,
            _event_type,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Logger for a module; the first positional argument is the event_type.

        logger = get_logger(__name__)
        logger.info("ownership_proof_rejected", wallet=short_wallet(addr), reason="verification_mismatch")
    """
    return structlog.get_logger(name).bind(logger=name)


def short_wallet(wallet: str) -> str:
    """First characters of a wallet address, enough to correlate log lines."""
    if len(wallet) <= WALLET_PREFIX_CHARS:
        return wallet
    return wallet[:WALLET_PREFIX_CHARS] + "..."


def bind_wallet(wallet: str) -> structlog.BoundLogger:
    """Logger with the truncated wallet bound to every subsequent call."""
    return get_logger("wallet_proof").bind(wallet=short_wallet(wallet))
