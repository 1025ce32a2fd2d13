"""Canonical serialization of token header and claims.

The signature covers the exact serialized bytes, so field order and literal
formatting are fixed here rather than left to a generic serializer.
"""

from __future__ import annotations

import json

from pushtoken.models.token import TokenClaims, TokenHeader


def _string_literal(value: str) -> str:
    return json.dumps(value, ensure_ascii=True)


def canonical_header_json(header: TokenHeader) -> str:
    """Serialize a header as ``{"alg":...,"kid":...}``."""
    return (
        '{"alg":' + _string_literal(header.alg)
        + ',"kid":' + _string_literal(header.kid)
        + "}"
    )


def canonical_claims_json(claims: TokenClaims) -> str:
    """Serialize claims as ``{"iss":...,"iat":<int>}``."""
    return (
        '{"iss":' + _string_literal(claims.iss)
        + ',"iat":' + str(int(claims.iat))
        + "}"
    )
