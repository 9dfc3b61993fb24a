"""
Internal verification results.

Every check produces a ProofCheck carrying a reason code on failure so that
logs and tests can tell failure causes apart. The public entry points downgrade
it to a plain bool; reason codes never reach callers of those entry points.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProofFailureReason(str, Enum):
    """Why an ownership or freshness check failed."""

    INVALID_ENCODING = "invalid_encoding"
    INVALID_SIGNATURE_ENCODING = "invalid_signature_encoding"
    KEY_IMPORT_FAILURE = "key_import_failure"
    VERIFICATION_MISMATCH = "verification_mismatch"
    MISSING_OR_MALFORMED_TIMESTAMP = "missing_or_malformed_timestamp"
    STALE_OR_FUTURE_TIMESTAMP = "stale_or_future_timestamp"


@dataclass(frozen=True)
class ProofCheck:
    """Outcome of one check: ok, or failed with a reason."""

    ok: bool
    reason: ProofFailureReason | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def passed(cls) -> ProofCheck:
        return cls(ok=True)

    @classmethod
    def failed(cls, reason: ProofFailureReason) -> ProofCheck:
        return cls(ok=False, reason=reason)
