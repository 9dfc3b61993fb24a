"""
Environment variable loading for Wallet Proof.

- PROOF_GOVERNANCE_DOMAIN: domain separation tag for canonical proofs
- PROOF_ALLOWED_ENVS: comma-separated environments accepted in canonical proofs
- PROOF_MAX_FUTURE_DRIFT_MS: tolerated clock drift for future-dated proofs
- PROOF_CANONICAL_MAX_AGE_MS: maximum age of a canonical proof
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is wallet_proof/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_GOVERNANCE_DOMAIN = "pumpmatch-governance"
DEFAULT_ALLOWED_ENVS = ("production", "development")
DEFAULT_MAX_FUTURE_DRIFT_MS = 30 * 1000
DEFAULT_CANONICAL_MAX_AGE_MS = 5 * 60 * 1000


def load_proof_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    if _ENV_PATH.is_file():
        load_dotenv(_ENV_PATH)


def _get_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def get_governance_domain() -> str:
    """Return PROOF_GOVERNANCE_DOMAIN, default pumpmatch-governance."""
    load_proof_env()
    return (os.getenv("PROOF_GOVERNANCE_DOMAIN") or "").strip() or DEFAULT_GOVERNANCE_DOMAIN


def get_allowed_envs() -> tuple[str, ...]:
    """Return PROOF_ALLOWED_ENVS as a tuple; default production, development."""
    load_proof_env()
    raw = (os.getenv("PROOF_ALLOWED_ENVS") or "").strip()
    if not raw:
        return DEFAULT_ALLOWED_ENVS
    envs = tuple(e.strip() for e in raw.split(",") if e.strip())
    return envs or DEFAULT_ALLOWED_ENVS


def get_max_future_drift_ms() -> int:
    load_proof_env()
    return _get_int("PROOF_MAX_FUTURE_DRIFT_MS", DEFAULT_MAX_FUTURE_DRIFT_MS)


def get_canonical_max_age_ms() -> int:
    load_proof_env()
    return _get_int("PROOF_CANONICAL_MAX_AGE_MS", DEFAULT_CANONICAL_MAX_AGE_MS)
