"""Test helpers for decoding and verifying generated tokens."""

from __future__ import annotations

import base64
import json
from typing import Any

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import encode_dss_signature


def b64url_decode(segment: str) -> bytes:
    """Decode an unpadded base64url segment."""
    padded = segment + "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def decode_json_segment(segment: str) -> dict[str, Any]:
    """Decode a base64url JSON segment into a dict."""
    loaded = json.loads(b64url_decode(segment).decode("ascii"))
    assert isinstance(loaded, dict)
    return loaded


def verify_token(token: str, public_key: ec.EllipticCurvePublicKey, *, jose: bool = False) -> None:
    """Verify a token signature, raising InvalidSignature on mismatch."""
    header_b64, claims_b64, signature_b64 = token.split(".")
    signature = b64url_decode(signature_b64)
    if jose:
        assert len(signature) == 64
        signature = encode_dss_signature(
            int.from_bytes(signature[:32], "big"),
            int.from_bytes(signature[32:], "big"),
        )
    public_key.verify(
        signature,
        f"{header_b64}.{claims_b64}".encode("ascii"),
        ec.ECDSA(hashes.SHA256()),
    )
