"""
Application settings for Wallet Proof.

Typed, immutable view over the environment getters in config.env. Read once and
cached; tests call reset_settings_cache() after changing the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from wallet_proof.config.env import (
    get_allowed_envs,
    get_canonical_max_age_ms,
    get_governance_domain,
    get_max_future_drift_ms,
)


@dataclass(frozen=True)
class Settings:
    """Policy for canonical governance proofs."""

    governance_domain: str
    allowed_envs: tuple[str, ...]
    max_future_drift_ms: int
    canonical_max_age_ms: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the current application settings."""
    return Settings(
        governance_domain=get_governance_domain(),
        allowed_envs=get_allowed_envs(),
        max_future_drift_ms=get_max_future_drift_ms(),
        canonical_max_age_ms=get_canonical_max_age_ms(),
    )


def reset_settings_cache() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
