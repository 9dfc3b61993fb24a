"""
Configuration management for Wallet Proof.

Loads settings from environment variables and an optional project-root .env.
Exposes a single source of truth for the canonical-proof policy.
"""

from wallet_proof.config.settings import Settings, get_settings, reset_settings_cache  # noqa: F401

__all__ = ["Settings", "get_settings", "reset_settings_cache"]
