"""
Pytest fixtures for Wallet Proof tests. Test keypairs are deterministic solders Keypairs.
"""

from __future__ import annotations

import pytest
from solders.keypair import Keypair

from wallet_proof.config import reset_settings_cache


@pytest.fixture
def keypair() -> Keypair:
    return Keypair.from_seed(bytes(range(32)))


@pytest.fixture
def other_keypair() -> Keypair:
    return Keypair.from_seed(bytes(range(32, 64)))


@pytest.fixture
def wallet(keypair) -> str:
    """Base58 wallet address of the test keypair."""
    return str(keypair.pubkey())


@pytest.fixture
def clean_proof_env(monkeypatch):
    """Unset PROOF_* variables and reset the settings cache before and after the test."""
    for name in (
        "PROOF_GOVERNANCE_DOMAIN",
        "PROOF_ALLOWED_ENVS",
        "PROOF_MAX_FUTURE_DRIFT_MS",
        "PROOF_CANONICAL_MAX_AGE_MS",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield monkeypatch
    reset_settings_cache()
