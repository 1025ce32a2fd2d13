"""Utility functions for pushtoken."""

from pushtoken.utils.base64url import b64url_encode
from pushtoken.utils.canonical import canonical_claims_json, canonical_header_json
from pushtoken.utils.clock import epoch_seconds, system_clock

__all__ = [
    "b64url_encode",
    "canonical_claims_json",
    "canonical_header_json",
    "epoch_seconds",
    "system_clock",
]
