"""URL-safe base64 helpers."""

from __future__ import annotations

import base64


def b64url_encode(data: bytes) -> str:
    """Encode bytes as URL-safe base64 with all ``=`` padding stripped."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
