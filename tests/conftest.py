"""Shared test fixtures for the pushtoken test suite."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec


class FixedClock:
    """Manually advanced clock for deterministic issued-at values."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture
def p256_key() -> ec.EllipticCurvePrivateKey:
    """Generate a fresh P-256 signing key."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def clock() -> FixedClock:
    """Clock pinned to epoch second 1_000_000_000."""
    return FixedClock(datetime.fromtimestamp(1_000_000_000, tz=UTC))


@pytest.fixture
def require_deterministic_ecdsa() -> None:
    """Skip when the linked OpenSSL cannot do RFC 6979 signing."""
    try:
        ec.ECDSA(hashes.SHA256(), deterministic_signing=True)
    except UnsupportedAlgorithm:
        pytest.skip("deterministic ECDSA not supported by this OpenSSL build")
