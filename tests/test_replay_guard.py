"""
Tests for the replay guard (replay.guard): timestamp extraction and freshness window.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from wallet_proof.proof.result import ProofFailureReason
from wallet_proof.replay.guard import (
    DEFAULT_MAX_AGE_MS,
    MAX_TIMESTAMP_MS,
    check_freshness,
    extract_timestamp,
    is_fresh,
)

TS = 1_700_000_000_000
MAX_AGE = 300_000


def _msg(ts) -> str:
    return f"Login to Pump Match\nNonce: abc123\nTimestamp: {ts}"


def test_default_window_is_five_minutes():
    assert DEFAULT_MAX_AGE_MS == 300_000


def test_extract_timestamp_basic():
    assert extract_timestamp(_msg(TS)) == TS


@pytest.mark.parametrize("sep", ["", " ", "   ", "\t", "\n"])
def test_extract_timestamp_any_whitespace(sep):
    assert extract_timestamp(f"Timestamp:{sep}{TS}") == TS


def test_extract_timestamp_first_match_wins():
    """Duplicate markers: only the first one counts."""
    message = f"Timestamp: {TS}\nTimestamp: {TS + 999_999}"
    assert extract_timestamp(message) == TS
    assert is_fresh(message, now=TS, max_age_ms=MAX_AGE) is True
    reversed_message = f"Timestamp: {TS + 999_999}\nTimestamp: {TS}"
    assert is_fresh(reversed_message, now=TS, max_age_ms=MAX_AGE) is False


@pytest.mark.parametrize(
    "message",
    [
        "no timestamp here",
        "",
        "Timestamp:",
        "Timestamp: abc",
        "Timestamp: -1700000000000",
        "timestamp: 1700000000000",
        "Timestamp: ١٧٠٠",
    ],
)
def test_missing_or_malformed_timestamp(message):
    result = check_freshness(message, now=TS, max_age_ms=MAX_AGE)
    assert not result.ok
    assert result.reason is ProofFailureReason.MISSING_OR_MALFORMED_TIMESTAMP


def test_overflowing_timestamp_rejected():
    """Values beyond an unsigned 64-bit integer are treated as malformed."""
    assert extract_timestamp(f"Timestamp: {MAX_TIMESTAMP_MS}") == MAX_TIMESTAMP_MS
    assert extract_timestamp(f"Timestamp: {MAX_TIMESTAMP_MS + 1}") is None
    assert extract_timestamp("Timestamp: " + "9" * 5000) is None


def test_leading_zeros_parse():
    assert extract_timestamp("Timestamp: 000" + str(TS)) == TS


def test_non_string_message():
    assert extract_timestamp(None) is None
    assert is_fresh(None, now=TS) is False


def test_fresh_at_exact_time():
    assert is_fresh(_msg(TS), now=TS, max_age_ms=MAX_AGE) is True


def test_window_boundaries_inclusive():
    """abs(now - ts) == max_age is accepted on both sides."""
    assert is_fresh(_msg(TS), now=TS + MAX_AGE, max_age_ms=MAX_AGE) is True
    assert is_fresh(_msg(TS), now=TS - MAX_AGE, max_age_ms=MAX_AGE) is True


def test_outside_window_rejected():
    """One millisecond past either edge fails with stale/future reason."""
    for now in (TS + MAX_AGE + 1, TS - MAX_AGE - 1):
        result = check_freshness(_msg(TS), now=now, max_age_ms=MAX_AGE)
        assert not result.ok
        assert result.reason is ProofFailureReason.STALE_OR_FUTURE_TIMESTAMP


def test_future_dated_message_rejected():
    """Pre-signed future timestamps beyond the window are rejected."""
    assert is_fresh(_msg(TS + 10 * MAX_AGE), now=TS, max_age_ms=MAX_AGE) is False


def test_zero_window():
    assert is_fresh(_msg(TS), now=TS, max_age_ms=0) is True
    assert is_fresh(_msg(TS), now=TS + 1, max_age_ms=0) is False


def test_uses_wall_clock_when_now_omitted():
    with patch("wallet_proof.replay.guard.time.time_ns", return_value=(TS + 1000) * 1_000_000):
        assert is_fresh(_msg(TS)) is True
    with patch("wallet_proof.replay.guard.time.time_ns", return_value=(TS + MAX_AGE + 1) * 1_000_000):
        assert is_fresh(_msg(TS)) is False
