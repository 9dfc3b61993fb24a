"""
v1 canonical JSON proofs for governance actions (squad management and the like).

The client signs the canonical rendering of a flat payload: keys sorted, compact
separators, UTF-8. Address and signature both travel as base-58. Unlike the
login path, protocol-level rejections carry a short error string; cryptographic
failures are reported as a single mismatch message.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, TypedDict

from wallet_proof.codec.base58 import MAX_PUBLIC_KEY_CHARS, MAX_SIGNATURE_CHARS, b58decode
from wallet_proof.config.settings import Settings, get_settings
from wallet_proof.core.exceptions import CanonicalPayloadError
from wallet_proof.crypto.ed25519 import verify
from wallet_proof.proof_logging import bind_wallet, get_logger
from wallet_proof.replay.guard import now_ms as current_ms

logger = get_logger(__name__)

PROTOCOL_VERSION = 1

# Magnitude from which JS switches numbers to exponent notation
JS_EXPONENT_THRESHOLD = 10**21

_LONE_SURROGATE = re.compile(r"[\ud800-\udfff]")


class CanonicalPayload(TypedDict, total=False):
    """Fields a v1 governance payload carries. Extra scalar keys are allowed."""

    action: str
    chain: str
    domain: str
    env: str
    nonce: str
    project: str
    role: str
    target: str
    timestamp: int
    v: int


@dataclass
class CanonicalVerification:
    """Result of canonical signature verification."""

    is_valid: bool
    derived_actor: str | None = None
    error: str | None = None


def _js_number(key: str, value: int | float) -> str:
    """Render a number exactly as JavaScript's Number#toString (and so JSON.stringify) does."""
    if isinstance(value, int) and abs(value) < JS_EXPONENT_THRESHOLD:
        return str(value)
    try:
        value = float(value)
    except OverflowError as e:
        raise CanonicalPayloadError(f"Number out of range for key {key!r}.") from e
    if not math.isfinite(value):
        raise CanonicalPayloadError(f"Non-finite number for key {key!r}.")
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""

    # shortest round-trip digits, same as the ones JS picks
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
        body = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return sign + body


def _js_string(value: str) -> str:
    # JSON.stringify escapes unpaired surrogates instead of failing
    return _LONE_SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", json.dumps(value, ensure_ascii=False))


def _canonical_value(key: str, value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return _js_string(value)
    if isinstance(value, (int, float)):
        return _js_number(key, value)
    raise CanonicalPayloadError(f"Nested objects are not allowed in V1 Canonical JSON (key {key!r}).")


def _utf16_order(key: str) -> bytes:
    """Sort key matching JS string comparison (UTF-16 code units)."""
    return key.encode("utf-16-be", "surrogatepass")


def generate_canonical_message(payload: Mapping[str, Any]) -> bytes:
    """Render payload as JSON.stringify would after sorting its keys, then encode to UTF-8."""
    for key in payload:
        if not isinstance(key, str):
            raise CanonicalPayloadError(f"Payload keys must be strings, got {key!r}.")
    members = [
        f"{_js_string(key)}:{_canonical_value(key, payload[key])}"
        for key in sorted(payload, key=_utf16_order)
    ]
    return ("{" + ",".join(members) + "}").encode("utf-8")


def _valid_timestamp(ts: Any) -> bool:
    if isinstance(ts, bool) or not isinstance(ts, (int, float)):
        return False
    # 0 and NaN are falsy on the client side; infinities go on to the window checks
    return not (ts == 0 or (isinstance(ts, float) and math.isnan(ts)))


def _reject(public_key_base58: str, error: str) -> CanonicalVerification:
    bind_wallet(public_key_base58).info("canonical_proof_rejected", error=error)
    return CanonicalVerification(is_valid=False, error=error)


def verify_canonical_signature(
    public_key_base58: str,
    signature_base58: str,
    payload: Mapping[str, Any],
    now_ms: int | None = None,
    settings: Settings | None = None,
) -> CanonicalVerification:
    """
    Verify a v1 canonical governance proof.

    Policy checks run first (version, domain, env, timestamp window), then the
    Ed25519 signature over generate_canonical_message(payload).
    """
    try:
        cfg = settings or get_settings()
        if payload.get("v") != PROTOCOL_VERSION or isinstance(payload.get("v"), bool):
            return _reject(public_key_base58, "Unsupported protocol version.")
        if payload.get("domain") != cfg.governance_domain:
            return _reject(public_key_base58, "Invalid domain separation.")
        if payload.get("env") not in cfg.allowed_envs:
            return _reject(public_key_base58, "Invalid environment.")

        now = current_ms() if now_ms is None else now_ms
        ts = payload.get("timestamp")
        if not _valid_timestamp(ts):
            return _reject(public_key_base58, "Invalid timestamp.")
        if ts > now + cfg.max_future_drift_ms:
            return _reject(public_key_base58, "Clock drift: Timestamp in future.")
        if ts < now - cfg.canonical_max_age_ms:
            return _reject(public_key_base58, "Signature expired.")

        message_bytes = generate_canonical_message(payload)
        actor = public_key_base58.strip()
        signature_text = signature_base58.strip()
        if len(actor) > MAX_PUBLIC_KEY_CHARS or len(signature_text) > MAX_SIGNATURE_CHARS:
            return _reject(public_key_base58, "Cryptographic signature mismatch.")
        public_key_bytes = b58decode(actor)
        signature_bytes = b58decode(signature_text)

        if not verify(public_key_bytes, message_bytes, signature_bytes):
            return _reject(public_key_base58, "Cryptographic signature mismatch.")

        return CanonicalVerification(is_valid=True, derived_actor=actor)

    except Exception as e:
        logger.error("canonical_proof_internal_error", error_type=type(e).__name__)
        return CanonicalVerification(is_valid=False, error="Internal verification failure.")
